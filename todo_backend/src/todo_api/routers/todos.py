from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from ..schemas import (
    TODO_CREATE_EXAMPLE,
    TODO_UPDATE_EXAMPLE,
    CreatedEnvelope,
    ErrorEnvelope,
    MessageEnvelope,
    TodoEnvelope,
    TodoListEnvelope,
)
from ..store import TodoStore
from ..utils import success_envelope

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)


def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=CreatedEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return its generated ID.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"model": ErrorEnvelope, "description": "Title or description missing"},
    },
)
def create_todo(
    payload: Dict[str, Any] = Body(..., examples=[TODO_CREATE_EXAMPLE]),
    store: TodoStore = Depends(get_store),
) -> CreatedEnvelope:
    """
    Create a new Todo. Extra fields in the body are stored as given.
    """
    todo_id = store.create(payload)
    return CreatedEnvelope(**success_envelope("Todo added successfully", todo_id))


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListEnvelope,
    summary="List Todos",
    description="Return every Todo item in creation order.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_todos(store: TodoStore = Depends(get_store)) -> TodoListEnvelope:
    """
    List all todos.
    """
    return TodoListEnvelope(**success_envelope(store.list_all()))


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        400: {"model": ErrorEnvelope, "description": "Malformed ID"},
        404: {"model": ErrorEnvelope, "description": "Todo not found"},
    },
)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> TodoEnvelope:
    """
    Retrieve a single Todo item by its ID.
    """
    return TodoEnvelope(**success_envelope(store.get_by_id(todo_id)))


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=MessageEnvelope,
    summary="Update Todo",
    description=(
        "Merge the supplied fields into an existing Todo item. Fields omitted from the body "
        "keep their current values; the ID cannot be changed."
    ),
    responses={
        200: {"description": "Todo updated"},
        400: {"model": ErrorEnvelope, "description": "Malformed ID or body"},
        404: {"model": ErrorEnvelope, "description": "Todo not found"},
    },
)
def update_todo(
    todo_id: str,
    payload: Dict[str, Any] = Body(..., examples=[TODO_UPDATE_EXAMPLE]),
    store: TodoStore = Depends(get_store),
) -> MessageEnvelope:
    """
    Partial update of a Todo item.
    """
    store.update_by_id(todo_id, payload)
    return MessageEnvelope(**success_envelope("Updated Todo successfully"))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=MessageEnvelope,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        200: {"description": "Todo deleted"},
        400: {"model": ErrorEnvelope, "description": "Malformed ID"},
        404: {"model": ErrorEnvelope, "description": "Todo not found"},
    },
)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> MessageEnvelope:
    """
    Delete a Todo. Returns 200 on success, 404 if not found.
    """
    store.delete_by_id(todo_id)
    return MessageEnvelope(**success_envelope("Deleted the todo successfully"))
