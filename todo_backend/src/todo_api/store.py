from __future__ import annotations

import itertools
import logging
import re
from threading import RLock
from typing import Any, List, Mapping, Optional

from .errors import InvalidId, NotFound, ValidationError
from .models import TodoRecord

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("title", "description")
_DIGITS = re.compile(r"[0-9]+")


# PUBLIC_INTERFACE
def parse_todo_id(value: Any) -> int:
    """
    Normalize a todo identifier to a positive integer.

    Accepts ints and ASCII base-10 strings (surrounding whitespace ignored).
    Raises InvalidId for None, booleans, floats, non-numeric text and
    values below 1.
    """
    if value is None or isinstance(value, bool):
        raise InvalidId()
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str):
        s = value.strip()
        if not _DIGITS.fullmatch(s):
            raise InvalidId()
        try:
            parsed = int(s)
        except ValueError:
            # longer than the interpreter's int conversion limit
            raise InvalidId() from None
    else:
        raise InvalidId()
    if parsed < 1:
        raise InvalidId()
    return parsed


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


# PUBLIC_INTERFACE
class TodoStore:
    """
    Thread-safe in-memory todo collection.

    Records are kept in insertion order. Every operation runs under a single
    lock so concurrent requests never interleave two mutations.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: List[TodoRecord] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def count(self) -> int:
        """Return the number of stored todos."""
        return len(self)

    def _allocate_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def _index_of(self, todo_id: int) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item["id"] == todo_id:
                return index
        return None

    def _locate(self, todo_id: int) -> int:
        index = self._index_of(todo_id)
        if index is None:
            logger.debug("Todo %s not found", todo_id)
            raise NotFound()
        return index

    def create(self, fields: Mapping[str, Any]) -> int:
        """
        Store a new todo and return its generated id.

        Raises ValidationError unless title and description are non-empty text.
        """
        if not isinstance(fields, Mapping):
            raise ValidationError("Todo must be a JSON object")
        if not all(_is_text(fields.get(name)) for name in _REQUIRED_FIELDS):
            raise ValidationError()

        with self._lock:
            todo_id = self._allocate_id()
            record: TodoRecord = {**fields, "id": todo_id}
            self._items.append(record)
        logger.info("Created todo %s", todo_id)
        return todo_id

    def list_all(self) -> List[TodoRecord]:
        """Return copies of all todos in insertion order."""
        with self._lock:
            return [item.copy() for item in self._items]

    def get_by_id(self, todo_id: Any) -> TodoRecord:
        """Return a copy of the todo with the given id."""
        parsed = parse_todo_id(todo_id)
        with self._lock:
            return self._items[self._locate(parsed)].copy()

    def update_by_id(self, todo_id: Any, fields: Mapping[str, Any]) -> None:
        """
        Merge fields into an existing todo.

        Keys absent from fields are kept; an "id" key is ignored.
        """
        parsed = parse_todo_id(todo_id)
        if not isinstance(fields, Mapping):
            raise ValidationError("Todo update must be a JSON object")

        with self._lock:
            index = self._locate(parsed)
            changes = {k: v for k, v in fields.items() if k != "id"}
            self._items[index] = {**self._items[index], **changes}
        logger.info("Updated todo %s (%s)", parsed, ", ".join(sorted(changes)) or "no fields")

    def delete_by_id(self, todo_id: Any) -> None:
        """Remove the todo with the given id."""
        parsed = parse_todo_id(todo_id)
        with self._lock:
            del self._items[self._locate(parsed)]
        logger.info("Deleted todo %s", parsed)
