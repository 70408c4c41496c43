"""Domain layer - dispatch contracts.

This layer defines the values and ports the dispatch core is built on. It has
NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- events/: DomainEvent base class (facts that already happened)
- enums/: HandlerGroup (sync/async concurrency class)
- protocols/: Handler, dispatcher and logger ports

The domain layer defines WHAT a handler is, not HOW events reach it.
"""
