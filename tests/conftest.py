import logging
import pytest
import sys
import os

# Add src dir to path to allow importing typeassert
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from typeassert.registry import clear_custom_checks


@pytest.fixture(scope="function", autouse=True)
def clear_registry():
    """Every test starts and ends with no custom checks registered."""
    clear_custom_checks()
    yield
    clear_custom_checks()

@pytest.fixture(scope="function", autouse=True)
def restore_typeassert_log_level():
    """Tests that change verbosity must not leak it into other tests."""
    log = logging.getLogger('typeassert')
    level = log.level
    yield
    log.setLevel(level)
