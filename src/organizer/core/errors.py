"""Error types raised by the organizer core."""


class OrganizerError(Exception):
    """Base class for errors carrying a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(OrganizerError):
    """Caller input is missing or malformed. Raised before any I/O."""


class NotFound(OrganizerError):
    """A lookup matched nothing."""


class Unauthorized(OrganizerError):
    """Supplied credentials do not match."""


class Conflict(OrganizerError):
    """The entity being created already exists."""


class StoreFailure(OrganizerError):
    """The underlying store failed. Never echoed to clients."""
