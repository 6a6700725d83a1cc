"""User state Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel

from organizer.schemas.task import CommentDocument, GroupDocument, TaskDocument


class SessionInfo(BaseModel):
    """Session marker of an assembled state."""

    authenticated: Literal["AUTHENTICATED"]
    id: str


class UserDocument(BaseModel):
    """User entry of an assembled state. The password hash is never returned."""

    id: str
    name: str


class UserState(BaseModel):
    """Everything a signed-in client needs to render its view."""

    session: SessionInfo
    groups: list[GroupDocument]
    tasks: list[TaskDocument]
    users: list[UserDocument]
    comments: list[CommentDocument]
