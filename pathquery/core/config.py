from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import logging


@dataclass
class QueryConfig:
    trace_enabled: bool = False

    logger: Optional[logging.Logger] = None
    metrics_increment: Optional[Callable[[str, int], None]] = None
