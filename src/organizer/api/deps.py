"""FastAPI dependencies for authentication and store access."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from organizer.config import Settings
from organizer.core.context import AppContext, get_context
from organizer.core.tokens import TokenStore
from organizer.store import Store

# HTTP Bearer token authentication
bearer_scheme = HTTPBearer(auto_error=False)

Context = Annotated[AppContext, Depends(get_context)]


def get_store(context: Context) -> Store:
    """Dependency to get the document store."""
    return context.store


def get_tokens(context: Context) -> TokenStore:
    """Dependency to get the session token registry."""
    return context.tokens


def get_app_settings(context: Context) -> Settings:
    """Dependency to get the settings the context was built with."""
    return context.settings


def get_current_user_id(
    token: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    tokens: Annotated[TokenStore, Depends(get_tokens)],
) -> str:
    """
    Resolve the user id behind a Bearer token.

    Args:
        token: Bearer token from Authorization header
        tokens: Session token registry

    Returns:
        Id of the authenticated user

    Raises:
        HTTPException: If the token is missing or was never issued
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = tokens.resolve(token.credentials)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


# Type aliases for cleaner dependency injection
DocumentStore = Annotated[Store, Depends(get_store)]
SessionTokens = Annotated[TokenStore, Depends(get_tokens)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
