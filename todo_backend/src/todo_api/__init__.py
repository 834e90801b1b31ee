"""
In-memory todo service package.

The FastAPI application lives in ``todo_api.main`` (``app`` for servers,
``create_app`` for isolated instances); the collection itself is
``todo_api.store.TodoStore``.
"""

__version__ = "0.1.0"
