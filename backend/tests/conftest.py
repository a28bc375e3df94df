"""Test environment setup — adds backend/ to sys.path for input_validator imports."""

import sys
from pathlib import Path

import pytest

backend_root = str(Path(__file__).resolve().parent.parent)
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

from input_validator.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear lru_cache between tests so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
