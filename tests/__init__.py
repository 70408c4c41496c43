"""Test suite for the cqrs-dispatch core.

Test structure:
- unit/: Unit tests - components in isolation with mocked loggers
- integration/: Integration tests - container wiring end to end
- utils/: Example cart commands, events and recording handlers
"""
