from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import InternalError, TodoError
from .logging_config import setup_logging
from .routers import todos as todos_router
from .schemas import MessageEnvelope
from .settings import Settings, get_settings
from .store import TodoStore
from .utils import error_envelope, success_envelope

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items kept in memory."},
]


async def todo_error_handler(request: Request, exc: TodoError) -> JSONResponse:
    """
    Translate a store outcome into its status code and envelope.
    """
    internal = isinstance(exc, InternalError)
    if internal:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, internal=internal),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a 400 envelope for malformed request bodies.

    Response format:
        {
            "success": false,
            "data": "Request validation failed",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    return JSONResponse(
        status_code=400,
        content=error_envelope("Request validation failed", detail=jsonable_encoder(exc.errors())),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Wrap routing errors (unknown route, wrong method) in the envelope.
    """
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(message),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log unexpected faults and answer with a generic 500 envelope.
    """
    logger.exception("Unhandled error during %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_envelope(InternalError.default_message, internal=True),
    )


# PUBLIC_INTERFACE
def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Todo store served by the app. A fresh empty store is created
            when omitted, so each app owns its own collection.
        settings: Settings to apply; read from the environment when omitted.

    Returns:
        A configured FastAPI instance with routes, CORS and error handlers.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Todo Service",
        description="HTTP service exposing CRUD operations over an in-memory todo list.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.store = store if store is not None else TodoStore()
    app.state.settings = settings

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # PUBLIC_INTERFACE
    @app.get("/health", response_model=MessageEnvelope, summary="Health Check", tags=["health"])
    def health_check() -> MessageEnvelope:
        """
        Health check endpoint.

        Returns:
            An envelope indicating service health.
        """
        return MessageEnvelope(**success_envelope("Healthy"))

    app.include_router(todos_router.router)
    logger.debug("Todo app created with %d stored todos", len(app.state.store))
    return app


app = create_app()
