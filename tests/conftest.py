"""Pytest configuration and fixtures.

This module provides common fixtures used across all tests.
"""

from datetime import UTC, datetime

import pytest

from vidshelf.core.logging import setup_logging

# Setup logging for tests
setup_logging()


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed reference time (UTC midnight) for age labels."""
    return datetime(2026, 10, 18, tzinfo=UTC)

