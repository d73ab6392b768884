class QueryError(ValueError):
    """Base error for the adapter and validation surfaces."""


class AdapterError(QueryError):
    """Raised when an entity adapter registration is invalid."""
