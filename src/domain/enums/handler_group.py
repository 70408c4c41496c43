"""Event handler concurrency classes.

Every event handler is registered into exactly one group at startup and keeps
that membership for its lifetime.

Groups:
- SYNC: Completion gates the command outcome. Handlers for one event run
  concurrently; events are processed one after another; first failure aborts.
- ASYNC: Detached from the command outcome. Failures are logged, never
  returned to the caller.
"""

from enum import Enum


class HandlerGroup(str, Enum):
    """Concurrency class tag used when registering an event handler."""

    SYNC = "sync"
    ASYNC = "async"
