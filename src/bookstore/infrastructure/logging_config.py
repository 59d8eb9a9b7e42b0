"""Process-wide logging setup.

Only the infrastructure layer logs; the domain and application layers
raise and leave reporting to their callers.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from bookstore.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_MAX_BYTES = 2 * 1024 * 1024
_BACKUPS = 3

_configured = False


def setup_logging(settings: Settings | None = None) -> None:
    global _configured
    if _configured:
        return

    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid duplicate handlers
    if not root.handlers:
        # stderr keeps CLI stdout clean for --json output
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

        if settings.log_to_file:
            try:
                settings.log_path.parent.mkdir(parents=True, exist_ok=True)
                fh = RotatingFileHandler(
                    settings.log_path,
                    maxBytes=_MAX_BYTES,
                    backupCount=_BACKUPS,
                )
                fh.setLevel(level)
                fh.setFormatter(formatter)
                root.addHandler(fh)
            except OSError as exc:
                root.warning("Failed to initialize file logging: %s", exc)

    _configured = True
