"""Custom exceptions. Raised only for invalid usage: a full or empty container is reported through return values."""


class PieceReserveError(Exception):
    """Top-level exception of the project"""


class InvalidConfigError(PieceReserveError):
    """Capacities, kind sets or environment values that cannot describe a session."""


class InvalidRequestError(PieceReserveError):
    """Request model failed validation."""


class SessionStateError(PieceReserveError):
    """A stored session cannot be turned back into a consistent queue / stack pair."""


class RepositoryError(PieceReserveError):
    """Session could not be found (or stored) in the repository."""
