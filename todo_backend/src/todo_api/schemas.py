from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Request body examples shown in the OpenAPI docs. Bodies themselves are
# accepted as open JSON objects and checked by the store.
TODO_CREATE_EXAMPLE: Dict[str, Any] = {
    "title": "Buy groceries",
    "description": "I should buy groceries",
    "completed": False,
}
TODO_UPDATE_EXAMPLE: Dict[str, Any] = {"completed": True}


class Envelope(BaseModel):
    """
    Uniform wrapper returned by every endpoint.
    """

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Any = Field(..., description="Payload or message")


# PUBLIC_INTERFACE
class MessageEnvelope(Envelope):
    """Envelope carrying a confirmation message."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"success": True, "data": "Updated Todo successfully"}}
    )

    data: str = Field(..., description="Confirmation message")


# PUBLIC_INTERFACE
class CreatedEnvelope(MessageEnvelope):
    """Envelope returned by the create endpoint."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"success": True, "data": "Todo added successfully", "id": 1}}
    )

    id: int = Field(..., description="Generated identifier of the new todo")


# PUBLIC_INTERFACE
class TodoEnvelope(Envelope):
    """Envelope carrying a single todo."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"success": True, "data": {"id": 1, **TODO_CREATE_EXAMPLE}}}
    )

    data: Dict[str, Any] = Field(..., description="The todo item")


# PUBLIC_INTERFACE
class TodoListEnvelope(Envelope):
    """Envelope carrying every stored todo."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"success": True, "data": [{"id": 1, **TODO_CREATE_EXAMPLE}]}}
    )

    data: List[Dict[str, Any]] = Field(..., description="All todo items in creation order")


class ErrorEnvelope(BaseModel):
    """
    Envelope returned for failed requests.
    """

    success: bool = Field(False, description="Always false")
    data: Any = Field(None, description="Message for validation and not-found failures")
    error: Any = Field(None, description="Message for internal failures")
