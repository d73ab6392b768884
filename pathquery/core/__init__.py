from .exceptions import QueryError, AdapterError
from .config import QueryConfig
from .types import Kind
from .path import PathParser, RawSegment, tokenize, parse_segment
from .literals import LiteralCoercer
from .entity import Entity, MethodTable, ObjectEntity
from .registry import AdapterRegistry, get_registry, register_adapter
from .context import EvaluationContext
from .resolver import Query, evaluate, coerce

__all__ = [
    "QueryError",
    "AdapterError",
    "QueryConfig",
    "Kind",
    "PathParser",
    "RawSegment",
    "tokenize",
    "parse_segment",
    "LiteralCoercer",
    "Entity",
    "MethodTable",
    "ObjectEntity",
    "AdapterRegistry",
    "get_registry",
    "register_adapter",
    "EvaluationContext",
    "Query",
    "evaluate",
    "coerce",
]
