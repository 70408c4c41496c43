"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_command_bus, get_logger, ...

The container is organized into modules by concern:
- infrastructure: Logging
- dispatch: Handler registry, router, fan-out engine, command bus
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Dispatch core
from src.core.container.dispatch import (
    configure_dispatch,
    get_command_bus,
    get_command_router,
    get_event_fanout_engine,
    get_handler_registry,
    reset_dispatch,
    shutdown_dispatch,
)

__all__ = [
    "configure_dispatch",
    "get_command_bus",
    "get_command_router",
    "get_event_fanout_engine",
    "get_handler_registry",
    "get_logger",
    "reset_dispatch",
    "shutdown_dispatch",
]
