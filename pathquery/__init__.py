from .core import (
    Query,
    QueryConfig,
    QueryError,
    Entity,
    MethodTable,
    ObjectEntity,
    register_adapter,
    evaluate,
    coerce,
    tokenize,
    parse_segment,
)

__all__ = [
    "Query",
    "QueryConfig",
    "QueryError",
    "Entity",
    "MethodTable",
    "ObjectEntity",
    "register_adapter",
    "evaluate",
    "coerce",
    "tokenize",
    "parse_segment",
]
