from __future__ import annotations
from typing import Any, Callable, Iterable, List

from .path import PathParser
from .utils import is_numeric

_KEYWORDS = {"null": None, "true": True, "false": False}


class LiteralCoercer:
    """
    Converts raw argument text into Python values.

    Anything that is not a quoted string, keyword, number or list is handed
    to ``resolve`` as a nested query; the caller binds that callback to the
    root data of the evaluation.
    """
    __slots__ = ("_resolve",)

    def __init__(self, resolve: Callable[[str], Any]) -> None:
        self._resolve = resolve

    def coerce(self, text: str) -> Any:
        text = text.strip()
        if not text:
            return None

        if len(text) >= 2 and text[0] == text[-1] and text[0] in ("\"", "'"):
            return text[1:-1]

        if text in _KEYWORDS:
            return _KEYWORDS[text]

        if is_numeric(text):
            return float(text)

        if text.startswith("[") and text.endswith("]"):
            inner = text[1:-1]
            if not inner.strip():
                return []

            return [self.coerce(piece) for piece in PathParser.split_top_level(inner, ",")]

        return self._resolve(text)

    def coerce_all(self, arguments: Iterable[str]) -> List[Any]:
        return [self.coerce(arg) for arg in arguments]
