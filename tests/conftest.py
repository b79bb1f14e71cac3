"""Pytest configuration and shared fixtures."""

import pytest
import structlog
from typing import Any, Dict, List

from collkit.data.sample import get_sample_data


@pytest.fixture
def packages() -> List[Dict[str, Any]]:
    """Fresh copy of the bundled sample packages."""
    return get_sample_data()


@pytest.fixture
def numbers() -> List[int]:
    """Small integer collection used across helper tests."""
    return [1, 2, 3, 4]


@pytest.fixture
def record() -> Dict[str, Any]:
    """Single record with a None-valued field."""
    return {
        "name": "lodash",
        "description": "Lodash modular utilities.",
        "license": "MIT",
        "homepage": None,
    }


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
