"""Pytest configuration shared across the suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop stream handlers installed by ``configure_logging`` during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
