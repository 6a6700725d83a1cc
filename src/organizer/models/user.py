"""User model."""
from datetime import UTC, datetime
from typing import ClassVar

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from organizer.database import Base


class User(Base):
    """User account. Usernames are kept unique by registration, not by the table."""

    __tablename__ = "users"
    __document__: ClassVar[dict[str, str]] = {
        "id": "id",
        "name": "name",
        "passwordHash": "password_hash",
    }

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    inserted_at: Mapped[datetime] = mapped_column(
        nullable=False, server_default=func.now(), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name})>"
