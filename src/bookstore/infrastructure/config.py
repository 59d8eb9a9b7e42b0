"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEFAULT_LOG_NAME = "bookstore.log"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    default_user_id: int
    log_level: str
    log_to_file: bool
    log_file: Path | None = None  # None: inside data_dir

    @property
    def log_path(self) -> Path:
        return self.log_file or self.data_dir / _DEFAULT_LOG_NAME

    @staticmethod
    def from_env() -> Settings:
        log_file = os.getenv("LOG_FILE")
        return Settings(
            data_dir=Path(os.getenv("BOOKSTORE_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            default_user_id=int(os.getenv("BOOKSTORE_USER_ID", "1")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_to_file=_env_flag("LOG_TO_FILE", "false"),
            log_file=Path(log_file) if log_file else None,
        )
