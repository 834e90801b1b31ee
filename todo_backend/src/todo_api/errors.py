from __future__ import annotations

from typing import Optional


# PUBLIC_INTERFACE
class TodoError(Exception):
    """
    Base class for outcomes raised by the todo store.

    Each subclass carries the HTTP status code the adapter should answer
    with; the store itself never builds responses.
    """

    status_code: int = 500
    default_message: str = "Todo operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# PUBLIC_INTERFACE
class ValidationError(TodoError):
    """Required input is missing or malformed."""

    status_code = 400
    default_message = "Title or description missing"


# PUBLIC_INTERFACE
class InvalidId(ValidationError):
    """The todo identifier is absent or cannot be parsed."""

    default_message = "Please provide a valid todo id"


# PUBLIC_INTERFACE
class NotFound(TodoError):
    """No todo exists with the given identifier."""

    status_code = 404
    default_message = "No todo found with the given id"


# PUBLIC_INTERFACE
class InternalError(TodoError):
    """Unexpected fault inside the store."""

    status_code = 500
    default_message = "Internal server error"
