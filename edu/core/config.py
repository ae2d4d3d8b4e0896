"""
Configuration helpers for the edu CLIs.

Exposes a Settings object read from environment variables (store paths,
logging level, JSON formatting) so that services and CLIs do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_TASKS_FILE = PROJECT_ROOT / "tasks.json"
DEFAULT_USERS_FILE = PROJECT_ROOT / "db.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    tasks_file: Path
    users_file: Path
    log_level: str
    json_indent: Optional[int]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: Optional[int] = None) -> Optional[int]:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        value = (value or "").strip()
        return Path(value).expanduser() if value else default

    return Settings(
        tasks_file=_path(os.getenv("EDU_TASKS_FILE"), DEFAULT_TASKS_FILE),
        users_file=_path(os.getenv("EDU_USERS_FILE"), DEFAULT_USERS_FILE),
        log_level=(os.getenv("EDU_LOG_LEVEL") or "WARNING").strip().upper(),
        json_indent=_int(os.getenv("EDU_JSON_INDENT")),
    )
