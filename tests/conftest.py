"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures.
For standard test builders, see tests/__init__.py
"""

import pytest

from spacefit.config_loader import MatchingConfig
from tests import make_listing, make_requirement


@pytest.fixture
def listing():
    return make_listing()


@pytest.fixture
def requirement():
    return make_requirement()


@pytest.fixture
def matching_config():
    return MatchingConfig()
