from __future__ import annotations

import json as _json
import logging
import sys
from typing import IO, Any

_PLAIN_FORMAT = "%(levelname)s | %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; ``extra={"search": {...}}`` is merged in."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        search = getattr(record, "search", None)
        if isinstance(search, dict):
            data.update(search)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(data, ensure_ascii=False, default=str)


def get_logger(
    name: str = "indexastar",
    level: int = logging.INFO,
    json: bool = False,
    stream: IO[str] | None = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter() if json else logging.Formatter(_PLAIN_FORMAT))
    logger.addHandler(handler)
    return logger
