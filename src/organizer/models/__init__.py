"""Database models."""
from organizer.models.group import Group
from organizer.models.task import Comment, Task
from organizer.models.user import User

__all__ = [
    "User",
    "Task",
    "Comment",
    "Group",
]
