from __future__ import annotations
from typing import Any, List, Mapping

from .models import ValidationReport
from .path import PathParser


def lint_query(query: str) -> List[str]:
    """
    Report constructs the resolver would silently tolerate: unclosed quotes
    or brackets, closers without an opener, and empty segments.
    """
    warnings: List[str] = []
    if not query:
        return warnings

    scan = PathParser.scan(query.strip(), ".")
    if scan.quote is not None:
        warnings.append(f"unterminated {scan.quote} string")

    if scan.depth > 0:
        warnings.append("unclosed bracket")

    if scan.stray_closers:
        warnings.append("unmatched closing bracket")

    for i, raw in enumerate(scan.pieces):
        if not PathParser.parse_segment(raw).name:
            warnings.append(f"empty segment #{i}")

    return warnings


def validate_queries(queries: Mapping[str, Any]) -> ValidationReport:
    """Check a named set of queries, e.g. the placeholders of a template."""
    errors: List[str] = []
    warnings = {}
    for name, query in queries.items():
        if not isinstance(query, str):
            errors.append(f"{name}: query must be a string, got {type(query).__name__}")
            continue

        found = lint_query(query)
        if found:
            warnings[name] = found

    return ValidationReport(is_valid=not errors, errors=errors, warnings=warnings)


def is_query_valid(query: Any) -> bool:
    return isinstance(query, str) and not lint_query(query)
