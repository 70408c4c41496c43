"""Event fan-out engine.

This module implements EventDispatcherProtocol on asyncio. For one ordered
event sequence it drives two independent passes over the handler registry:

Synchronous pass (awaited, decides the outcome):
    - Per event, every supporting SYNC handler is started as a task
    - The next event starts only after all handlers of the current one finished
    - The first handler to fail ends the pass (fail-fast); later events are
      skipped and still-running siblings are detached, never cancelled
    - A raising supports() fails the pass the same way
    - No retry

Asynchronous pass (detached, best-effort):
    - Spawned as a background task before the sync pass starts
    - Per event, in order, every supporting ASYNC handler is started as a task
    - Failures are logged and counted, never returned to the caller
    - One failing handler never stops its siblings
    - Never cancelled by the caller; outlives dispatch()

Usage:
    >>> engine = EventFanoutEngine(registry=registry, logger=logger)
    >>> result = await engine.dispatch([ItemAddedToCart(cart_id="c-1", product_id="p-9")])
    >>> # result reflects SYNC handlers only; ASYNC handlers may still be running
    >>> await engine.drain(timeout=5.0)  # shutdown / tests
"""

import asyncio
from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors.dispatch_error import DispatchError
from src.core.result import Failure, Result, Success
from src.domain.enums.handler_group import HandlerGroup
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_handler_protocol import EventHandlerProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.events.handler_registry import HandlerRegistry


class EventFanoutEngine:
    """Sync + async fan-out over a sealed handler registry.

    Thread Safety:
        - Single event loop design (asyncio)
        - Registry is read-only during dispatch; concurrent dispatch() calls
          share it without coordination

    Attributes:
        _registry: Handler groups to dispatch to.
        _logger: Logger for async failures and pass progress.
            Holding a task here keeps it alive until done.
            task here keeps it alive until done.
        _error_counts: Async handler failures per handler class name.
    """

    def __init__(self, registry: HandlerRegistry, logger: LoggerProtocol) -> None:
        """Initialize engine.

        Args:
            registry: Handler registry (populated and sealed at startup).
            logger: Structured logger.
        """
        self._registry = registry
        self._logger = logger
        self._detached: set[asyncio.Task[None]] = set()
        self._error_counts: dict[str, int] = defaultdict(int)

    async def dispatch(
        self,
        events: Sequence[DomainEvent],
    ) -> Result[None, DispatchError]:
        """Dispatch events to both handler groups.

        Args:
            events: Events in production order.

        Returns:
            Success(value=None) after every SYNC handler finished for every
            event. Failure(DispatchError) describing the SYNC handler that
            failed first, returned without waiting for its siblings.
            Handlers failing in the same loop iteration are ordered by
            registration.
        """
        events = tuple(events)
        if not events:
            return Success(value=None)

        self._spawn_async_pass(events)
        return await self._run_sync_pass(events)

    @property
    def pending_count(self) -> int:
        """Number of detached tasks (async passes, abandoned sync siblings) in flight."""
        return len(self._detached)

    async def drain(self, timeout: float | None = None) -> bool:
        """Wait for detached tasks without cancelling them.

        Tasks detached while draining are waited for as well.

        Args:
            timeout: Seconds to wait in total. None waits indefinitely.

        Returns:
            True if nothing is left running, False if the timeout elapsed first.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout

        while self._detached:
            remaining = None if deadline is None else deadline - loop.time()
            if remaining is not None and remaining <= 0:
                return False
            await asyncio.wait(set(self._detached), timeout=remaining)

        return True

    def get_error_counts(self) -> dict[str, int]:
        """Async handler failure counts keyed by handler class name."""
        return dict(self._error_counts)

    # ------------------------------------------------------------------
    # Synchronous pass
    # ------------------------------------------------------------------

    async def _run_sync_pass(
        self,
        events: tuple[DomainEvent, ...],
    ) -> Result[None, DispatchError]:
        sync_handlers = self._registry.handlers_for(HandlerGroup.SYNC)

        for event in events:
            handlers: list[EventHandlerProtocol] = []
            for handler in sync_handlers:
                try:
                    supported = handler.supports(event)
                except Exception as exc:
                    return Failure(error=self._build_error(event, handler, exc))
                if supported:
                    handlers.append(handler)

            if not handlers:
                continue

            invocations = {
                asyncio.create_task(self._invoke(handler, event)): handler
                for handler in handlers
            }
            pending = set(invocations)

            while pending:
                done, pending = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                for task, handler in invocations.items():
                    if task not in done:
                        continue
                    failure = task.result()
                    if failure is not None:
                        self._detach(pending)
                        return Failure(
                            error=self._build_error(event, handler, failure.error)
                        )

        return Success(value=None)

    def _detach(self, tasks: Iterable[asyncio.Task[Any]]) -> None:
        """Keep tasks referenced until done; the caller no longer awaits them."""
        for task in tasks:
            self._detached.add(task)
            task.add_done_callback(self._detached.discard)

    # ------------------------------------------------------------------
    # Asynchronous pass
    # ------------------------------------------------------------------

    def _spawn_async_pass(self, events: tuple[DomainEvent, ...]) -> None:
        self._detach([asyncio.create_task(self._run_async_pass(events))])

    async def _run_async_pass(self, events: tuple[DomainEvent, ...]) -> None:
        async_handlers = self._registry.handlers_for(HandlerGroup.ASYNC)
        invocations: list[asyncio.Task[bool]] = []

        for event in events:
            for handler in async_handlers:
                try:
                    supported = handler.supports(event)
                except Exception as exc:
                    self._record_async_failure(event, handler, exc)
                    continue
                if supported:
                    invocations.append(
                        asyncio.create_task(self._invoke_detached(handler, event))
                    )

        if not invocations:
            return

        outcomes = await asyncio.gather(*invocations)
        self._logger.debug(
            "async_pass_completed",
            event_count=len(events),
            invocation_count=len(invocations),
            failure_count=outcomes.count(False),
        )

    async def _invoke_detached(
        self,
        handler: EventHandlerProtocol,
        event: DomainEvent,
    ) -> bool:
        failure = await self._invoke(handler, event)
        if failure is None:
            return True
        self._record_async_failure(event, handler, failure.error)
        return False

    def _record_async_failure(
        self,
        event: DomainEvent,
        handler: EventHandlerProtocol,
        cause: Any,
    ) -> None:
        handler_name = type(handler).__name__
        self._error_counts[handler_name] += 1
        self._logger.warning(
            "async_event_handler_failed",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            handler_name=handler_name,
            error_type=type(cause).__name__,
            error_message=str(cause),
        )

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    async def _invoke(
        handler: EventHandlerProtocol,
        event: DomainEvent,
    ) -> Failure[Any] | None:
        """Run one handler; return its failure, or None on success."""
        try:
            outcome = await handler.handle(event)
        except Exception as exc:
            return Failure(error=exc)

        if isinstance(outcome, Failure):
            return outcome
        return None

    @staticmethod
    def _build_error(
        event: DomainEvent,
        handler: EventHandlerProtocol,
        cause: Any,
    ) -> DispatchError:
        handler_name = type(handler).__name__
        event_type = type(event).__name__
        event_id = str(event.event_id)

        if isinstance(cause, Exception):
            code = ErrorCode.EVENT_HANDLER_FAILED
            reason = f"{type(cause).__name__}: {cause}"
        else:
            code = ErrorCode.EVENT_HANDLER_RETURNED_FAILURE
            reason = str(cause)

        return DispatchError(
            code=code,
            message=f"{handler_name} failed handling {event_type}: {reason}",
            details={
                "event_type": event_type,
                "event_id": event_id,
                "handler": handler_name,
            },
            event_type=event_type,
            event_id=event_id,
            handler_name=handler_name,
            cause=cause,
        )
