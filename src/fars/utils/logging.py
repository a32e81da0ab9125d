"""Centralized logging setup with an optional JSON formatter."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Union

# Attributes present on every LogRecord; anything else came from extra=
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed via ``extra=`` (``year``, ``state``, ``path`` …) are
    merged into the payload at top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                payload[key] = value

        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
) -> logging.Logger:
    """Attach a stderr handler to the ``fars`` logger.

    Calling this again replaces the previous handler instead of stacking
    a second one.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("fars")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_fars_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT))
    handler._fars_handler = True
    logger.addHandler(handler)
    return logger
