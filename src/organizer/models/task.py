"""Task and comment models."""

from datetime import UTC, datetime
from typing import ClassVar

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from organizer.database import Base


class Task(Base):
    """Task model."""

    __tablename__ = "tasks"
    __document__: ClassVar[dict[str, str]] = {
        "id": "id",
        "name": "name",
        "isComplete": "is_complete",
        "owner": "owner",
        "group": "group",
    }

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_complete: Mapped[bool] = mapped_column(nullable=False, default=False)
    owner: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    group: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    inserted_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now(), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, name={self.name}, owner={self.owner})>"


class Comment(Base):
    """Comment on a task. The author need not own the task."""

    __tablename__ = "comments"
    __document__: ClassVar[dict[str, str]] = {
        "id": "id",
        "task": "task",
        "owner": "owner",
        "content": "content",
    }

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    task: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    owner: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    content: Mapped[str] = mapped_column(String(10000), nullable=False)
    inserted_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now(), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, task={self.task})>"
