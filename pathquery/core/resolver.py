from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .config import QueryConfig
from .context import EvaluationContext
from .literals import LiteralCoercer
from .path import PathParser, RawSegment
from .registry import AdapterRegistry
from .types import Kind
from .utils import as_index


def _lookup(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        if key in container:
            return container[key]

        index = as_index(key)
        if index is not None and index in container:
            return container[index]

        return None

    index = as_index(key)
    if index is None or index >= len(container):
        return None

    return container[index]


class Query:
    """
    Resolve a query string against nested data.

    Mappings and sequences are walked by key; any other object is asked for
    the method named by the segment, which is called with the segment's
    arguments. Unresolvable steps yield None. Errors raised by the called
    methods are not caught.

    A step that yields a scalar does not move the walk: the next segment is
    looked up on the same mapping or object again, and only the returned
    value changes.

    Examples:
      >>> Query("user.name", {"user": {"name": "Ada"}}).result()
      'Ada'
      >>> Query("items.1", {"items": ["a", "b"]}).result()
      'b'
    """

    def __init__(
        self,
        query: Optional[str] = None,
        data: Any = None,
        *,
        config: Optional[QueryConfig] = None,
        registry: Optional[AdapterRegistry] = None,
    ) -> None:
        self.query = query
        self.data = data
        self._ctx = EvaluationContext(data, config, registry)
        self._coercer = LiteralCoercer(self._resolve)

    def result(self) -> Any:
        self._ctx.increment("query.evaluations")
        if self._is_empty():
            return self.data

        return self._resolve(self.query)

    def trace(self) -> Dict[str, Any]:
        steps: List[Dict[str, Any]] = []
        if self._is_empty():
            return {"path": self.query, "segments": [], "steps": steps, "value": self.data}

        value = self._resolve(self.query, steps)
        return {"path": self.query, "segments": PathParser.tokenize(self.query), "steps": steps, "value": value}

    def coerce(self, text: str) -> Any:
        return self._coercer.coerce(text)

    def _is_empty(self) -> bool:
        return not self.query

    def _resolve(self, query: str, steps: Optional[List[Dict[str, Any]]] = None) -> Any:
        ctx = self._ctx
        data = ctx.root
        value = None

        for segment in PathParser.parse(query):
            kind = ctx.classify(data)
            if kind is Kind.SCALAR:
                self._record(steps, segment, kind, [], data)
                return data

            args: List[Any] = []
            value = None
            if kind is Kind.MAPPING:
                value = _lookup(data, segment.name)

            else:
                method = ctx.as_entity(data).find_method(segment.name)
                if method is not None:
                    args = self._coercer.coerce_all(segment.arguments)
                    value = method(*args)

            if value is None:
                ctx.increment("query.missing")

            self._record(steps, segment, kind, args, value)

            if ctx.classify(value) is not Kind.SCALAR:
                data = value

        return value

    def _record(self, steps: Optional[List[Dict[str, Any]]], segment: RawSegment, kind: Kind, args: List[Any], value: Any) -> None:
        if steps is not None:
            steps.append({"segment": segment.name, "kind": kind.value, "args": args, "value": value})

        config = self._ctx.config
        if config.trace_enabled and config.logger is not None:
            config.logger.debug("Query %r: segment %r on %s -> %r", self.query, segment.name, kind.value, value)


def evaluate(
    path: Optional[str],
    context: Any,
    *,
    config: Optional[QueryConfig] = None,
    registry: Optional[AdapterRegistry] = None,
) -> Any:
    return Query(path, context, config=config, registry=registry).result()


def coerce(
    text: str,
    context: Any = None,
    *,
    config: Optional[QueryConfig] = None,
    registry: Optional[AdapterRegistry] = None,
) -> Any:
    """Coerce one argument literal; bare words resolve against ``context``."""
    return Query(None, context, config=config, registry=registry).coerce(text)
