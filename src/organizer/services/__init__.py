"""Service layer for business logic."""
from organizer.services.auth_service import login, register
from organizer.services.task_service import add_comment, add_new_task, update_task
from organizer.services.user_state import assemble_user_state, collect_owner_ids

__all__ = [
    # Auth service
    "login",
    "register",
    # User state
    "assemble_user_state",
    "collect_owner_ids",
    # Task service
    "add_new_task",
    "update_task",
    "add_comment",
]
