"""Authentication routes."""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from organizer.api.deps import AppSettings, CurrentUserId, DocumentStore, SessionTokens
from organizer.core.errors import Conflict, InvalidArgument, NotFound, Unauthorized
from organizer.schemas.state import UserState
from organizer.schemas.user import (
    Credentials,
    LoginResponse,
    MessageResponse,
    RegistrationResponse,
)
from organizer.services.auth_service import login, register
from organizer.services.user_state import assemble_user_state

router = APIRouter(tags=["auth"])


@router.post(
    "/authenticate",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "Unknown user, wrong password or missing body"}},
)
def authenticate(
    store: DocumentStore,
    tokens: SessionTokens,
    credentials: Credentials | None = None,
):
    """
    Log in and receive a session token with the user's state.

    Args:
        store: Document store
        tokens: Session token registry
        credentials: Login credentials

    Returns:
        Token and assembled user state
    """
    try:
        if credentials is None:
            raise InvalidArgument("Request body is null")
        token, state = login(store, tokens, credentials.username, credentials.password)
    except (InvalidArgument, NotFound, Unauthorized) as e:
        return PlainTextResponse(e.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return LoginResponse(token=token, state=state)


@router.post(
    "/user/create",
    response_model=RegistrationResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": MessageResponse, "description": "Account name taken"}},
)
def create_user(
    store: DocumentStore,
    settings: AppSettings,
    credentials: Credentials | None = None,
):
    """
    Register a new user with a default group.

    Args:
        store: Document store
        settings: Application settings
        credentials: Registration data

    Returns:
        New user id and assembled user state
    """
    try:
        if credentials is None:
            raise InvalidArgument("Request body is null")
        user_id, state = register(
            store,
            credentials.username,
            credentials.password,
            group_name=settings.default_group_name,
        )
    except (Conflict, InvalidArgument) as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=MessageResponse(message=e.message).model_dump(),
        )

    return RegistrationResponse(user_id=user_id, state=state)


@router.get("/user/state", response_model=UserState, response_model_exclude_none=True)
def get_user_state(user_id: CurrentUserId, store: DocumentStore):
    """
    Reassemble the state of the user holding the Bearer token.

    Args:
        user_id: Authenticated user id
        store: Document store

    Returns:
        Assembled user state
    """
    return assemble_user_state(store, {"id": user_id})
