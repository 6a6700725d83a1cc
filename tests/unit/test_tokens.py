"""Unit tests for the session token store."""
from concurrent.futures import ThreadPoolExecutor

from organizer.core.tokens import SessionToken, TokenStore


def test_add_and_resolve():
    """An issued token resolves to its user."""
    tokens = TokenStore()
    session_token = tokens.add("token-1", "user-1")

    assert session_token == SessionToken(token="token-1", user_id="user-1")
    assert tokens.resolve("token-1") == "user-1"


def test_resolve_unknown_token():
    """A token that was never issued resolves to nothing."""
    tokens = TokenStore()
    tokens.add("token-1", "user-1")
    assert tokens.resolve("token-2") is None


def test_tokens_accumulate_per_user():
    """Logging in again adds a token without invalidating the old one."""
    tokens = TokenStore()
    tokens.add("first", "user-1")
    tokens.add("second", "user-1")

    assert len(tokens) == 2
    assert tokens.resolve("first") == "user-1"
    assert tokens.resolve("second") == "user-1"


def test_concurrent_adds_are_not_lost():
    """Tokens added from many threads are all kept."""
    tokens = TokenStore()

    def add(i: int) -> None:
        tokens.add(f"token-{i}", f"user-{i % 7}")

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(add, range(500)))

    assert len(tokens) == 500
    assert tokens.resolve("token-499") == "user-2"
