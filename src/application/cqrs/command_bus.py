"""Command bus facade.

Composes the command router and the event dispatcher into a single call that
resolves to one outcome per command.

Flow:
1. events = router.route(command)
2. No events: Success immediately (dispatcher not invoked)
3. Otherwise: return await dispatcher.dispatch(events)

Notes:
    Produced events are NOT written to an event log before dispatch. A
    durable variant must persist ``events`` between steps 1 and 3 to get
    at-least-once delivery across restarts.
"""

from src.application.commands.base_command import Command
from src.application.cqrs.command_router import CommandRouter
from src.core.errors.dispatch_error import DispatchError
from src.core.result import Failure, Result, Success
from src.domain.protocols.event_dispatcher_protocol import EventDispatcherProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class CommandBus:
    """Entry point for commands.

    Concurrent ``handle`` calls are independent: no ordering or locking is
    applied across commands.
    """

    def __init__(
        self,
        router: CommandRouter,
        dispatcher: EventDispatcherProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize command bus with dependencies.

        Args:
            router: Router selecting the command handler.
            dispatcher: Event dispatcher (sync + async fan-out).
            logger: Structured logger.
        """
        self._router = router
        self._dispatcher = dispatcher
        self._logger = logger

    async def handle(self, command: Command) -> Result[None, DispatchError]:
        """Handle command and dispatch the events it produced.

        Args:
            command: Command to handle.

        Returns:
            Success(value=None) when no events were produced or every sync
            event handler finished. Failure(DispatchError) for the first
            sync handler failure.
        """
        command_type = type(command).__name__
        events = self._router.route(command)

        if not events:
            return Success(value=None)

        self._logger.debug(
            "command_dispatched",
            command_type=command_type,
            event_count=len(events),
        )

        result = await self._dispatcher.dispatch(events)

        match result:
            case Failure(error=error):
                self._logger.warning(
                    "command_failed",
                    command_type=command_type,
                    error_code=error.code.value,
                    event_type=error.event_type,
                    event_id=error.event_id,
                    handler_name=error.handler_name,
                    error_message=error.message,
                )

        return result
