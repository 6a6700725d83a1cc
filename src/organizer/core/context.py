"""Process-wide application context."""

import threading
from dataclasses import dataclass, field

from organizer.config import Settings, get_settings
from organizer.core.tokens import TokenStore
from organizer.store import Store


@dataclass
class AppContext:
    """Shared state for the lifetime of the server process."""

    settings: Settings
    store: Store
    tokens: TokenStore = field(default_factory=TokenStore)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(settings=settings, store=Store(settings))


_context: AppContext | None = None
_context_lock = threading.Lock()


def get_context() -> AppContext:
    """Return the process context, creating it on first use."""
    global _context

    if _context is None:
        with _context_lock:
            if _context is None:
                _context = AppContext.from_settings(get_settings())
    return _context


def set_context(context: AppContext | None) -> None:
    """Install a prebuilt context, or clear it so the next call rebuilds one."""
    global _context

    with _context_lock:
        _context = context
