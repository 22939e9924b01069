import pytest

from alchemist.config import get_settings
from alchemist.validators import ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    """A fresh engine with the default validator chain."""
    return ValidationEngine()


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    # Settings are cached per process; tests that tweak env vars need a clean read
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
