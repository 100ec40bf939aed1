# file: phonemetagen/logging_config.py
"""
Logging configuration.

phonemetagen uses standard library logging. Logs go to stderr so that stdout
stays free for command output; a JSON formatter is available for CI.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        # Include fields passed through `extra=`.
        for k, v in record.__dict__.items():
            if k in _RECORD_ATTRS or k.startswith("_"):
                continue
            payload[k] = v

        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


def configure_logging(*, level: str = "INFO", json_logging: bool = False) -> None:
    """
    Configure root logging for CLI use.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Replace existing handlers to avoid duplicate logs on repeated CLI calls.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if json_logging:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
