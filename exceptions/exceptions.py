"""
Custom exceptions for the Chad Log service.

These exceptions are intentionally simple and descriptive.
They are used across:

  - runtime/store/
  - runtime/api/

Placing them at the project root (exceptions/) avoids circular imports
between the stores and the HTTP layer that reports their failures.
"""


class StoreError(Exception):
    """
    Raised when a log store cannot complete an operation.

    Covers an unreachable or locked backend as well as persistence-layer
    failures such as constraint violations. The original exception is kept
    on `cause` (and chained by the raiser) so callers can log it.

    Example:
        store.append("hello")   ← database file is locked past the timeout
        StoreError("append", OperationalError("database is locked"))
    """

    def __init__(self, operation, cause=None):
        self.operation = operation
        self.cause = cause
        msg = f"Log store operation '{operation}' failed"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
