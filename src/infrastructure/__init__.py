"""Infrastructure layer - Adapters implementing domain ports.

Structure:
- events/: Handler registry and the asyncio fan-out engine
- logging/: structlog-backed LoggerProtocol adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
