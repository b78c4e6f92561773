"""
Configuration helpers for the todo service.

Routers/services should read paths and flags from Settings instead of
touching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]

HOST = "0.0.0.0"
PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    static_dir: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=_path(os.getenv("TODO_DATA_FILE"), ROOT / "todos.json"),
        static_dir=_path(os.getenv("TODO_STATIC_DIR"), ROOT / "web"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
