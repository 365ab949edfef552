"""
Shared fixtures for bytesize tests.
"""
import pytest

from bytesize import config


@pytest.fixture(autouse=True)
def default_settings():
    """Restore the process-wide formatting defaults after every test."""
    config.reset()
    yield config.settings
    config.reset()


@pytest.fixture
def long_units():
    """Long unit names with a space separator, e.g. "2 kilobytes"."""
    return config.configure(default_format='%.0f ', long_units=True)
