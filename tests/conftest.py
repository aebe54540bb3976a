from __future__ import annotations

import pytest

from trigger.config import reset_config


@pytest.fixture(autouse=True)
def _reset_trigger_config():
    """Each test starts from, and leaves behind, the default configuration."""
    reset_config()
    yield
    reset_config()
