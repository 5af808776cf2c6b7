import pytest

from tests.app.test_helpers import setup_test_environment

setup_test_environment()

from app.config import get_settings

@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """
    Ensure each test starts with a fresh Settings() object.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
