from __future__ import annotations
from typing import Any, Optional

from .config import QueryConfig
from .entity import Entity
from .registry import AdapterRegistry, get_registry
from .types import Kind


class EvaluationContext:
    """
    Per-evaluation state: the root data plus the config and adapter registry
    used while walking it.
    """
    __slots__ = ("root", "config", "registry")

    def __init__(self, root: Any, config: Optional[QueryConfig] = None, registry: Optional[AdapterRegistry] = None) -> None:
        self.root = root
        self.config = config or QueryConfig()
        self.registry = registry or get_registry()

    def get_from_root(self, path: Optional[str]) -> Any:
        from .resolver import Query

        return Query(path, self.root, config=self.config, registry=self.registry).result()

    def classify(self, value: Any) -> Kind:
        return self.registry.classify(value)

    def as_entity(self, value: Any) -> Entity:
        return self.registry.as_entity(value)

    def increment(self, metric: str) -> None:
        if self.config.metrics_increment:
            self.config.metrics_increment(metric, 1)
