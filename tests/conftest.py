import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import registry
from config import get_settings
from encoding import _hashids_for, get_permutation


@pytest.fixture(autouse=True)
def isolated_state():
    """
    Clears the cached settings, the hashids instances and the process-wide
    registry so every test starts from the defaults.
    """
    get_settings.cache_clear()
    get_permutation.cache_clear()
    _hashids_for.cache_clear()
    registry.reset()
    yield
    get_settings.cache_clear()
    get_permutation.cache_clear()
    _hashids_for.cache_clear()
    registry.reset()
