"""Root test configuration: reset global logging state between tests"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI commands configure structlog globally; restore defaults after each test."""
    yield
    structlog.reset_defaults()
