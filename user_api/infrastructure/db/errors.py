"""
Name: Connection Pool Errors

Responsibilities:
  - Typed pool lifecycle errors instead of bare RuntimeError
"""


class DatabasePoolError(Exception):
    """Base class for connection pool errors."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() was called more than once."""


class PoolNotInitializedError(DatabasePoolError):
    """The pool was used before init_pool()."""
