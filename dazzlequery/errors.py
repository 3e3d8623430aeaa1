"""Error types for DazzleQuery.

All validation errors are raised immediately at the point of misuse.
"Not found" conditions (no parent, empty selection, unmatched selector)
are never errors; they produce empty selections or -1.
"""


class QueryError(Exception):
    """Base class for all DazzleQuery errors."""
    pass


class InvalidInputError(QueryError, TypeError):
    """Raised when a query is created over something that is not a plain object."""
    pass


class InvalidConfigError(QueryError, ValueError):
    """Raised when one or more adapter options are not callable."""
    pass


class InvalidArgumentError(QueryError, TypeError):
    """Raised when a Selection method receives an argument of the wrong kind."""
    pass
