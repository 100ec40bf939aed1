# file: tests/conftest.py
from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    # CLI commands install a stderr handler on the root logger; drop it after each test.
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if type(h) is logging.StreamHandler:
            root.removeHandler(h)
    root.setLevel(level)
