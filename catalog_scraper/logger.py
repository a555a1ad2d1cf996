"""
Structured logging setup.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Dict, Any

from catalog_scraper.config import config

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Configure structured logging for the catalog_scraper namespace."""
    logger = logging.getLogger("catalog_scraper")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())

    logger.handlers.clear()
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger


# Global logger instance
logger = setup_logger(config.LOG_LEVEL)
