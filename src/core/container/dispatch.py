"""Dispatch dependency factories.

Application-scoped singletons for the command/event dispatch core, plus the
startup registration entry point.

Lifecycle:
    1. configure_dispatch(...) once at startup (registers, then seals)
    2. get_command_bus().handle(command) for every command
    3. await shutdown_dispatch() at process exit (drains async handlers)

Usage:
    configure_dispatch(
        command_handlers=[AddItemToCartHandler()],
        registrations=[
            HandlerRegistration(handler=ProjectionHandler(), group=HandlerGroup.SYNC),
            HandlerRegistration(handler=SearchIndexHandler(), group=HandlerGroup.ASYNC),
        ],
    )
    result = await get_command_bus().handle(AddItemToCart(cart_id="c-1", product_id="p-9"))
"""

from collections.abc import Iterable
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger
from src.domain.enums.handler_group import HandlerGroup

if TYPE_CHECKING:
    from src.application.cqrs.command_bus import CommandBus
    from src.application.cqrs.command_handler import CommandHandlerProtocol
    from src.application.cqrs.command_router import CommandRouter
    from src.application.cqrs.metadata import HandlerRegistration
    from src.infrastructure.events.event_fanout_engine import EventFanoutEngine
    from src.infrastructure.events.handler_registry import HandlerRegistry


@lru_cache()
def get_handler_registry() -> "HandlerRegistry":
    """Get handler registry singleton (app-scoped, empty until configured)."""
    from src.infrastructure.events.handler_registry import HandlerRegistry

    return HandlerRegistry()


@lru_cache()
def get_command_router() -> "CommandRouter":
    """Get command router singleton (app-scoped)."""
    from src.application.cqrs.command_router import CommandRouter

    return CommandRouter(logger=get_logger().bind(component="command_router"))


@lru_cache()
def get_event_fanout_engine() -> "EventFanoutEngine":
    """Get event fan-out engine singleton bound to the shared registry."""
    from src.infrastructure.events.event_fanout_engine import EventFanoutEngine

    return EventFanoutEngine(
        registry=get_handler_registry(),
        logger=get_logger().bind(component="event_fanout_engine"),
    )


@lru_cache()
def get_command_bus() -> "CommandBus":
    """Get command bus singleton (router + fan-out engine).

    Returns:
        CommandBus wired to the shared router and engine.

    Usage:
        result = await get_command_bus().handle(command)
    """
    from src.application.cqrs.command_bus import CommandBus

    return CommandBus(
        router=get_command_router(),
        dispatcher=get_event_fanout_engine(),
        logger=get_logger().bind(component="command_bus"),
    )


def configure_dispatch(
    command_handlers: Iterable["CommandHandlerProtocol"],
    registrations: Iterable["HandlerRegistration"],
) -> None:
    """Register all handlers and seal the registry.

    This is the only mutation path into the dispatch core. It must complete
    before the first command is handled.

    Args:
        command_handlers: Command handlers in priority order (first match wins).
        registrations: Event handler registration table, in invocation order.

    Raises:
        RuntimeError: If the registry was already sealed by an earlier call.
        ValueError: If a registration names an unknown handler group. Nothing
            is registered in that case.
    """
    router = get_command_router()
    registry = get_handler_registry()

    if registry.is_sealed:
        raise RuntimeError("Dispatch is already configured; registry is sealed")

    # Resolve the whole table before touching router or registry so a
    # malformed entry leaves both untouched.
    command_handlers = list(command_handlers)
    entries = [
        (registration.handler, HandlerGroup(registration.group))
        for registration in registrations
    ]

    for command_handler in command_handlers:
        router.register(command_handler)

    for handler, group in entries:
        registry.register(handler, group)

    registry.seal()

    get_logger().info(
        "dispatch_configured",
        command_handlers=len(router.handlers),
        sync_handlers=len(registry.handlers_for(HandlerGroup.SYNC)),
        async_handlers=len(registry.handlers_for(HandlerGroup.ASYNC)),
    )


async def shutdown_dispatch(timeout: float | None = None) -> bool:
    """Wait for detached async handlers to finish.

    Args:
        timeout: Seconds to wait. Defaults to settings.async_drain_timeout_seconds.

    Returns:
        True if every async pass finished, False if the timeout elapsed.
    """
    engine = get_event_fanout_engine()
    drain_timeout = settings.async_drain_timeout_seconds if timeout is None else timeout
    drained = await engine.drain(timeout=drain_timeout)

    if not drained:
        get_logger().warning(
            "async_handlers_still_running",
            pending_passes=engine.pending_count,
            timeout_seconds=drain_timeout,
        )
    return drained


def reset_dispatch() -> None:
    """Drop all dispatch singletons (tests only)."""
    get_command_bus.cache_clear()
    get_event_fanout_engine.cache_clear()
    get_command_router.cache_clear()
    get_handler_registry.cache_clear()
