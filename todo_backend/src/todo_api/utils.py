from __future__ import annotations

from typing import Any, Dict, Optional


# PUBLIC_INTERFACE
def success_envelope(data: Any, todo_id: Optional[int] = None) -> Dict[str, Any]:
    """
    Build the standard success envelope.

    Args:
        data: Payload or confirmation message.
        todo_id: Id of a newly created todo; only included when given.

    Returns:
        Dict with keys: success, data and optionally id.
    """
    envelope: Dict[str, Any] = {"success": True, "data": data}
    if todo_id is not None:
        envelope["id"] = todo_id
    return envelope


# PUBLIC_INTERFACE
def error_envelope(message: str, internal: bool = False, **extra: Any) -> Dict[str, Any]:
    """
    Build the standard failure envelope.

    Client-visible misses carry the message under "data"; internal faults
    carry it under "error". Extra keyword arguments are added as-is.
    """
    key = "error" if internal else "data"
    return {"success": False, key: message, **extra}
