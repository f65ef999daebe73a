# catalog_log.py
# Structured JSON logger shared by the search service and the keyword engine.
# Every log line is one JSON object.

import json
import logging
from datetime import datetime, timezone

from config import LOG_LEVEL


class StructuredFormatter(logging.Formatter):
    """
    Formats every log line as a JSON object.
    Attach extra fields via: logger.info("msg", extra={"product_id": "..."})
    """
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "ts":      datetime.now(timezone.utc).isoformat(),
            "level":   record.levelname,
            "service": record.name,
            "message": record.getMessage(),
        }
        for key in ("product_id", "query", "category", "keyword_count",
                    "result_count", "db_path"):
            if hasattr(record, key):
                log[key] = getattr(record, key)

        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)

        return json.dumps(log, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a structured logger for the given module name.
    Call this once per module:  logger = get_logger(__name__)
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    return logger
