"""Assembly of the per-user view returned after authentication."""

import logging
from collections.abc import Mapping
from typing import Any

from organizer.core.errors import InvalidArgument
from organizer.store import Store

logger = logging.getLogger(__name__)

AUTHENTICATED = "AUTHENTICATED"


def _user_id(user: Any) -> Any:
    if isinstance(user, Mapping):
        return user.get("id")
    return getattr(user, "id", None)


def _owner(entry: Any) -> Any:
    # A list of documents has no owner of its own
    if isinstance(entry, Mapping):
        return entry.get("owner")
    return None


def collect_owner_ids(tasks: list[dict], comments: list[dict]) -> list[str]:
    """
    Build the list of user ids whose documents accompany the state.

    The comment list is appended as a single entry rather than unpacked, so
    only task owners are collected. Duplicates are kept.
    """
    return [owner for owner in map(_owner, [*tasks, comments]) if owner]


def assemble_user_state(store: Store, user: Any) -> dict[str, Any]:
    """
    Build the state a client needs after signing in.

    Args:
        store: Document store
        user: Mapping or object with an ``id``

    Returns:
        Dict with ``session``, ``groups``, ``tasks``, ``users`` and ``comments``

    Raises:
        InvalidArgument: If user is missing or has no id
    """
    user_id = _user_id(user) if user is not None else None
    if not user_id:
        raise InvalidArgument("User and user.id are required")

    tasks = store.collection("tasks").find({"owner": user_id})
    comments = store.collection("comments").find(
        {"task": {"$in": [task["id"] for task in tasks]}}
    )
    owner_ids = collect_owner_ids(tasks, comments)
    additional_users = store.collection("users").find({"id": {"$in": owner_ids}})
    own_user = store.collection("users").find_one({"id": user_id})
    groups = store.collection("groups").find({"owner": user_id})

    logger.debug(
        f"Assembled state for user {user_id}: {len(tasks)} tasks, "
        f"{len(comments)} comments, {len(groups)} groups"
    )

    return {
        "session": {"authenticated": AUTHENTICATED, "id": user_id},
        "groups": groups,
        "tasks": tasks,
        "users": [doc for doc in [own_user, *additional_users] if doc],
        "comments": comments,
    }
