from __future__ import annotations

import re
from typing import Optional

_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INDEX = re.compile(r"0|[1-9]\d*")


def is_numeric(text: str) -> bool:
    return _NUMERIC.fullmatch(text) is not None


def as_index(key: str) -> Optional[int]:
    """Return ``key`` as a non-negative integer when it is a plain decimal."""
    if _INDEX.fullmatch(key) is None:
        return None

    return int(key)
