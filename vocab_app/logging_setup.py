# vocab_app/logging_setup.py
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", *, force: bool = False) -> logging.Logger:
    """Configure root logging once and return the service logger."""
    numeric = getattr(logging, (level or "").strip().upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT, force=force)
    return logging.getLogger("vocab_app")
