"""Group model."""
from datetime import UTC, datetime
from typing import ClassVar

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from organizer.database import Base


class Group(Base):
    """A user's named bucket of tasks."""

    __tablename__ = "groups"
    __document__: ClassVar[dict[str, str]] = {
        "id": "id",
        "owner": "owner",
        "name": "name",
    }

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    owner: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    inserted_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now(), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name})>"
