# file: tests/test_logging_config.py
from __future__ import annotations

import json
import logging

from phonemetagen.logging_config import JsonFormatter, configure_logging


def _record(msg: str, *args: object, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("phonemetagen.test", logging.INFO, __file__, 1, msg, args, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record("wrote %s", "metadata.rs", size=4)))
    assert payload["msg"] == "wrote metadata.rs"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "phonemetagen.test"
    assert payload["size"] == 4
    assert "lineno" not in payload
    assert "args" not in payload


def test_json_formatter_skips_private_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record("hi", _internal=True)))
    assert "_internal" not in payload


def test_configure_logging_json_to_stderr(capsys) -> None:
    configure_logging(level="debug", json_logging=True)
    logging.getLogger("phonemetagen.test").info("hello", extra={"artifact": "metadata"})
    captured = capsys.readouterr()
    assert captured.out == ""
    line = captured.err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["msg"] == "hello"
    assert payload["artifact"] == "metadata"
    assert logging.getLogger().level == logging.DEBUG
