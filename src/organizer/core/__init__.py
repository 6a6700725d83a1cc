"""Core application modules."""
from organizer.core.errors import (
    Conflict,
    InvalidArgument,
    NotFound,
    OrganizerError,
    StoreFailure,
    Unauthorized,
)
from organizer.core.security import (
    generate_id,
    hash_password,
    issue_token,
    verify_password,
)
from organizer.core.tokens import SessionToken, TokenStore

__all__ = [
    # Errors
    "OrganizerError",
    "InvalidArgument",
    "NotFound",
    "Unauthorized",
    "Conflict",
    "StoreFailure",
    # Security
    "hash_password",
    "verify_password",
    "issue_token",
    "generate_id",
    # Tokens
    "SessionToken",
    "TokenStore",
]
