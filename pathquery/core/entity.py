from __future__ import annotations
from functools import partial
import inspect
from typing import Any, Callable, Dict, Optional, Sequence

Method = Callable[..., Any]

_MISSING = object()


class Entity:
    """
    Capability of a value that answers method-style segments.

    ``find_method`` returns a callable taking the coerced arguments, or None
    when the entity neither declares ``name`` nor has a catch-all handler.
    """
    __slots__ = ()

    def find_method(self, name: str) -> Optional[Method]:
        raise NotImplementedError

    def has_method(self, name: str) -> bool:
        return self.find_method(name) is not None

    def call(self, name: str, args: Sequence[Any] = ()) -> Any:
        method = self.find_method(name)
        if method is None:
            return None

        return method(*args)


class MethodTable(Entity):
    """
    Explicit entity built from a name -> callable table.

    ``fallback`` is invoked as ``fallback(name, *args)`` for names missing
    from the table.
    """
    __slots__ = ("methods", "fallback")

    def __init__(self, methods: Optional[Dict[str, Method]] = None, fallback: Optional[Method] = None) -> None:
        self.methods: Dict[str, Method] = dict(methods or {})
        self.fallback = fallback

    def find_method(self, name: str) -> Optional[Method]:
        method = self.methods.get(name)
        if method is not None:
            return method

        if self.fallback is not None:
            return partial(self.fallback, name)

        return None

    def __repr__(self) -> str:
        return f"MethodTable({sorted(self.methods)!r}, fallback={self.fallback is not None})"


class ObjectEntity(Entity):
    """
    Adapts a plain Python object.

    Callable attributes are methods. Other attributes (including property
    values) answer as zero-argument accessors and ignore call arguments.
    A class defining ``__getattr__`` acts as its own catch-all.
    """
    __slots__ = ("obj",)

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def find_method(self, name: str) -> Optional[Method]:
        if not name:
            return None

        if inspect.getattr_static(self.obj, name, _MISSING) is not _MISSING:
            attr = getattr(self.obj, name)

        elif inspect.getattr_static(type(self.obj), "__getattr__", _MISSING) is not _MISSING:
            try:
                attr = getattr(self.obj, name)
            except AttributeError:
                return None

        else:
            return None

        if callable(attr):
            return attr

        return lambda *args: attr

    def __repr__(self) -> str:
        return f"ObjectEntity({self.obj!r})"
