"""Command dispatch router.

Matches an incoming command against registered command handlers and returns
the events produced by the first handler that claims it.

Flow:
1. Scan handlers in registration order
2. First handler whose supports(command) is True handles the command
3. Return its events unchanged (possibly empty)
4. No match: return [] (unsupported commands are silently ignored)

Architecture:
- Application layer ONLY imports from core and domain
- Routing is synchronous; it never dispatches events
"""

from src.application.commands.base_command import Command
from src.application.cqrs.command_handler import CommandHandlerProtocol
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class CommandRouter:
    """First-match router over registered command handlers.

    Handlers are registered once at startup. When several handlers claim the
    same command only the first one registered is invoked.

    Attributes:
        _handlers: Command handlers in registration order.
        _logger: Logger for unmatched commands.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        handlers: list[CommandHandlerProtocol] | None = None,
    ) -> None:
        """Initialize router.

        Args:
            logger: Structured logger.
            handlers: Optional initial handlers, in priority order.
        """
        self._logger = logger
        self._handlers: list[CommandHandlerProtocol] = list(handlers or [])

    def register(self, handler: CommandHandlerProtocol) -> None:
        """Append a command handler (startup only)."""
        self._handlers.append(handler)

    @property
    def handlers(self) -> tuple[CommandHandlerProtocol, ...]:
        """Registered command handlers in registration order."""
        return tuple(self._handlers)

    def route(self, command: Command) -> list[DomainEvent]:
        """Route command to the first supporting handler.

        Args:
            command: Command to handle.

        Returns:
            Events produced by the matched handler, in order. Empty list if
            no handler supports the command.

        Raises:
            Exception: Whatever the matched handler's ``handle`` raises.
        """
        for handler in self._handlers:
            if handler.supports(command):
                return list(handler.handle(command))

        self._logger.debug(
            "command_unhandled",
            command_type=type(command).__name__,
            handler_count=len(self._handlers),
        )
        return []
