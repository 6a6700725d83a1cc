"""Login and registration."""

import logging
from typing import Any

from organizer.core.errors import Conflict, InvalidArgument, NotFound, Unauthorized
from organizer.core.security import generate_id, hash_password, issue_token, verify_password
from organizer.core.tokens import TokenStore
from organizer.services.user_state import assemble_user_state
from organizer.store import Store

logger = logging.getLogger(__name__)

DEFAULT_GROUP_NAME = "To Do"


def login(
    store: Store,
    tokens: TokenStore,
    username: str | None,
    password: str | None,
) -> tuple[str, dict[str, Any]]:
    """
    Authenticate a user by name and password.

    Args:
        store: Document store
        tokens: Session token registry
        username: Account name
        password: Plaintext password

    Returns:
        Tuple of (token, user state)

    Raises:
        NotFound: If no user has that name
        Unauthorized: If the password does not match
    """
    user = store.collection("users").find_one({"name": username})
    if not user:
        logger.warning(f"Login failed: unknown user {username!r}")
        raise NotFound("User not found")

    if password is None or not verify_password(password, user["passwordHash"]):
        logger.warning(f"Login failed: wrong password for user {user['id']}")
        raise Unauthorized("Password incorrect")

    token = issue_token()
    tokens.add(token, user["id"])
    logger.info(f"User {user['id']} authenticated")

    return token, assemble_user_state(store, user)


def register(
    store: Store,
    username: str | None,
    password: str | None,
    group_name: str = DEFAULT_GROUP_NAME,
) -> tuple[str, dict[str, Any]]:
    """
    Create a user and their default group.

    Args:
        store: Document store
        username: Account name, must be unused
        password: Plaintext password
        group_name: Name of the group created for the user

    Returns:
        Tuple of (new user id, user state)

    Raises:
        Conflict: If the name is taken
        InvalidArgument: If username or password is missing
    """
    users = store.collection("users")

    if users.find_one({"name": username}):
        logger.warning(f"Registration rejected: name {username!r} already taken")
        raise Conflict("A user with that account name already exists.")

    if not username or password is None:
        raise InvalidArgument("Username and password are required")

    user_id = generate_id()
    users.insert_one({"name": username, "id": user_id, "passwordHash": hash_password(password)})

    group_id = generate_id()
    store.collection("groups").insert_one({"id": group_id, "owner": user_id, "name": group_name})

    logger.info(f"User {user_id} registered with default group {group_id}")

    return user_id, assemble_user_state(store, {"id": user_id, "name": username})
