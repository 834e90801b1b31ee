from __future__ import annotations

from typing import Any, Dict

# PUBLIC_INTERFACE
TodoRecord = Dict[str, Any]
"""
A todo item as kept by the in-memory store.

Records are open maps: the caller's fields are kept verbatim and merged
with the generated identifier.

Known fields:
- id: Unique positive integer, assigned at creation and never changed
- title: Non-empty text, required at creation
- description: Non-empty text, required at creation
- completed: Optional completion flag, absent unless supplied
"""
