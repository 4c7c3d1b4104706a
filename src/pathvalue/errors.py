"""pathvalue error types.

All custom exceptions inherit from PathValueError to allow
catching any pathvalue-specific error.
"""


class PathValueError(Exception):
    """Base exception for all pathvalue errors."""

    pass


class InvalidArgumentError(PathValueError, ValueError):
    """An operation was called with arguments outside its contract."""

    pass
