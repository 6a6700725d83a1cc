"""In-memory session token store."""

import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionToken:
    """An issued token and the user it authenticates."""

    token: str
    user_id: str


class TokenStore:
    """
    Process-lifetime registry of issued session tokens.

    Tokens are only ever appended. There is no expiry and no logout, so a
    token stays valid until the process exits.
    """

    def __init__(self) -> None:
        self._tokens: list[SessionToken] = []
        self._lock = threading.Lock()

    def add(self, token: str, user_id: str) -> SessionToken:
        """Record a token for a user."""
        session_token = SessionToken(token=token, user_id=user_id)
        with self._lock:
            self._tokens.append(session_token)
        return session_token

    def resolve(self, token: str) -> str | None:
        """Return the user id a token was issued to, if any."""
        with self._lock:
            for session_token in self._tokens:
                if session_token.token == token:
                    return session_token.user_id
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
