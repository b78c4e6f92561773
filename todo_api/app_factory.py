"""Entry point for running the todo API under uvicorn."""
from __future__ import annotations

import uvicorn

from todo_api.app import app, create_app
from todo_api.core.config import HOST, PORT, get_settings
from todo_api.core.log import configure_logging

__all__ = ["app", "create_app", "main"]


def main() -> None:
    settings = get_settings()
    logger = configure_logging(settings.log_level)
    logger.info("Server is running at http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
