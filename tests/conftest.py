"""Pytest configuration for async dispatch testing.

This configuration ensures:
1. Async tests are always marked for pytest-asyncio
2. Custom markers (unit, integration) are registered
3. Common fixtures (mock logger, registry, engine) are shared
"""

import inspect
from unittest.mock import MagicMock

import pytest

from src.infrastructure.events.event_fanout_engine import EventFanoutEngine
from src.infrastructure.events.handler_registry import HandlerRegistry


@pytest.fixture
def mock_logger():
    """MagicMock standing in for LoggerProtocol (bind returns itself)."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def registry():
    """Fresh, unsealed handler registry."""
    return HandlerRegistry()


@pytest.fixture
def engine(registry, mock_logger):
    """Fan-out engine over the ``registry`` fixture."""
    return EventFanoutEngine(registry=registry, logger=mock_logger)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests through the container wiring"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
