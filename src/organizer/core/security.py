"""Security utilities for password hashing and token generation."""

import uuid

from passlib.context import CryptContext

# Unsalted hex MD5, kept so stored hashes stay compatible with existing accounts.
# Not suitable for new deployments.
pwd_context = CryptContext(schemes=["hex_md5"])


def hash_password(password: str) -> str:
    """Hash a password. The same input always yields the same hash."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its stored hash."""
    return hash_password(plain_password) == hashed_password


def issue_token() -> str:
    """Generate an opaque session token."""
    return str(uuid.uuid4())


def generate_id() -> str:
    """Generate a document identifier."""
    return str(uuid.uuid4())
