"""Application layer - Command handling and orchestration.

This layer contains the write side of the CQRS split:
- Commands: Intent to change state
- Command router: First-match selection of a command handler
- Command bus: Route a command, then dispatch the events it produced

Structure:
- commands/: Command base class
- cqrs/: Router, bus, command handler contract, registration metadata

The application layer only imports from core and domain; the event fan-out
engine is injected through EventDispatcherProtocol.
"""
