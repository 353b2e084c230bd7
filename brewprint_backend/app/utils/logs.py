# brewprint_backend/app/utils/logs.py
from __future__ import annotations

import logging

from brewprint_backend.app.config.manifest import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def get_logger(name: str) -> logging.Logger:
    """
    Named logger under the `brewprint.` namespace with a stream handler
    attached once. Level comes from BREWPRINT_LOG_LEVEL.
    """
    full = name if name.startswith("brewprint") else f"brewprint.{name}"
    log = logging.getLogger(full)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
        log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return log
