from __future__ import annotations
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Callable, Dict, List, Optional

from .entity import Entity, ObjectEntity
from .exceptions import AdapterError
from .types import Kind

EntityFactory = Callable[[Any], Entity]

_SCALAR_TYPES = (str, bytes, bytearray, Number)


class AdapterRegistry:
    """
    Classifies context values and maps Python types to entity adapters.

    Registered adapters win over the built-in rules, so a type that would
    otherwise be a scalar or a container can be made dispatchable.
    """
    def __init__(self) -> None:
        self._adapters: Dict[type, EntityFactory] = {}
        self._order: List[type] = []  # lookup precedence

    def register(self, kind: type, factory: EntityFactory, *, prepend: bool = False) -> None:
        if not isinstance(kind, type):
            raise AdapterError("Adapter key must be a type.")

        if not callable(factory):
            raise AdapterError(f"Adapter for {kind.__name__} must be callable.")

        self._adapters[kind] = factory
        if kind in self._order:
            self._order.remove(kind)

        if prepend:
            self._order.insert(0, kind)

        else:
            self._order.append(kind)

    def unregister(self, kind: type) -> None:
        self._adapters.pop(kind, None)
        if kind in self._order:
            self._order.remove(kind)

    def get_factory(self, value: Any) -> Optional[EntityFactory]:
        for kind in self._order:
            if isinstance(value, kind):
                return self._adapters[kind]

        return None

    def classify(self, value: Any) -> Kind:
        if isinstance(value, Entity) or self.get_factory(value) is not None:
            return Kind.ENTITY

        if value is None or isinstance(value, _SCALAR_TYPES):
            return Kind.SCALAR

        if isinstance(value, (Mapping, Sequence)):
            return Kind.MAPPING

        return Kind.ENTITY

    def as_entity(self, value: Any) -> Entity:
        if isinstance(value, Entity):
            return value

        factory = self.get_factory(value)
        if factory is not None:
            return factory(value)

        return ObjectEntity(value)

    @property
    def adapted_types(self) -> List[type]:
        return list(self._order)


_global_registry: Optional[AdapterRegistry] = None


def get_registry() -> AdapterRegistry:
    global _global_registry
    if _global_registry is None:
        _global_registry = AdapterRegistry()

    return _global_registry


def register_adapter(kind: type, factory: EntityFactory, *, prepend: bool = False) -> None:
    get_registry().register(kind, factory, prepend=prepend)
