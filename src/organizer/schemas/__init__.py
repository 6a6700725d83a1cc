"""Pydantic schemas for request/response validation."""
from organizer.schemas.state import SessionInfo, UserDocument, UserState
from organizer.schemas.task import (
    CommentDocument,
    GroupDocument,
    NewCommentRequest,
    NewTaskRequest,
    TaskDocument,
    TaskUpdate,
    TaskUpdateRequest,
)
from organizer.schemas.user import (
    Credentials,
    LoginResponse,
    MessageResponse,
    RegistrationResponse,
)

__all__ = [
    # State schemas
    "SessionInfo",
    "UserDocument",
    "UserState",
    # Task schemas
    "TaskDocument",
    "TaskUpdate",
    "CommentDocument",
    "GroupDocument",
    "NewTaskRequest",
    "TaskUpdateRequest",
    "NewCommentRequest",
    # User schemas
    "Credentials",
    "LoginResponse",
    "RegistrationResponse",
    "MessageResponse",
]
