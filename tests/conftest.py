import logging

import pytest
import structlog

from warehouse.config import reset_settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    reset_settings()
