from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from todo_api.core.config import Settings, get_settings
from todo_api.repositories import TodoStorage
from todo_api.repositories.json_storage import CorruptStorageError, JSONTodoStorage
from todo_api.routers import todos as todos_router
from todo_api.services.todo_service import TodoService

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            logger.exception("%s %s failed after %.1fms", request.method, request.url.path, elapsed)
            raise
        elapsed = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1fms)", request.method, request.url.path, response.status_code, elapsed)
        return response


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    msg = first.get("msg", "invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": _validation_message(exc)}, status_code=400)


async def _on_corrupt_storage(request: Request, exc: CorruptStorageError) -> JSONResponse:
    return JSONResponse({"error": "Todo storage is unreadable"}, status_code=500)


def create_app(settings: Settings | None = None, storage: TodoStorage | None = None) -> FastAPI:
    settings = settings or get_settings()
    storage = storage if storage is not None else JSONTodoStorage(settings.data_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        storage.ensure_initialized()
        yield

    app = FastAPI(title="Todo API", lifespan=lifespan)
    app.state.todo_service = TodoService(storage)

    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(CorruptStorageError, _on_corrupt_storage)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(todos_router.router)

    # Mounted last so /api routes always win.
    if settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; front-end disabled", settings.static_dir)
    return app


app = create_app()
