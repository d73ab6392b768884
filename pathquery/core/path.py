from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

_OPENERS = "(["
_CLOSERS = ")]"
_QUOTES = "\"'"


@dataclass(frozen=True)
class ScanResult:
    pieces: Tuple[str, ...]
    depth: int = 0
    quote: Optional[str] = None
    stray_closers: int = 0


@dataclass(frozen=True)
class RawSegment:
    """One unit of a path, with its argument literals still as raw text."""
    name: str
    arguments: Tuple[str, ...] = ()
    called: bool = False


class PathParser:
    """
    Break query strings into segments.

    Grammar per segment:
      - name                 e.g. user
      - name(arg, ...)       method-style call, e.g. find("x"), slice(0, 2)

    Argument literals:
      - "text" / 'text'      strings (dots and commas inside are kept)
      - null, true, false
      - 1, -2.5, 1e3         numbers (always floats)
      - [a, b, ...]          lists of literals
      - anything else        a nested query, resolved against the root data

    Examples:
      user.profile.name
      page.find("a.b,c").title()
      pages.filterBy("tags", [site.tag, "draft"]).first
    """

    @staticmethod
    def scan(text: str, sep: str) -> ScanResult:
        """
        Split on top-level ``sep`` and report what is left open at the end:
        bracket depth, an unterminated quote, and closers that had no opener.
        """
        pieces: List[str] = []
        start = 0
        depth = 0
        stray = 0
        quote: Optional[str] = None
        prev = ""

        for i, ch in enumerate(text):
            if quote is not None:
                if ch == quote and prev != "\\":
                    quote = None

            elif ch in _QUOTES and prev != "\\":
                quote = ch

            elif ch in _OPENERS:
                depth += 1

            elif ch in _CLOSERS:
                if depth == 0:
                    stray += 1
                else:
                    depth -= 1

            elif ch == sep and depth == 0:
                pieces.append(text[start:i].strip())
                start = i + 1

            prev = ch

        pieces.append(text[start:].strip())
        return ScanResult(tuple(pieces), depth, quote, stray)

    @classmethod
    def split_top_level(cls, text: str, sep: str) -> List[str]:
        return list(cls.scan(text, sep).pieces)

    @classmethod
    def tokenize(cls, path: Optional[str]) -> List[str]:
        if not path:
            return []

        return cls.split_top_level(path.strip(), ".")

    @classmethod
    def parse_segment(cls, raw: str) -> RawSegment:
        open_at = raw.find("(")
        if open_at == -1:
            return RawSegment(name=raw.strip())

        close_at = raw.rfind(")")
        if close_at < open_at:
            close_at = len(raw)

        interior = raw[open_at + 1:close_at]
        arguments: Tuple[str, ...] = ()
        if interior.strip():
            arguments = tuple(cls.split_top_level(interior, ","))

        return RawSegment(name=raw[:open_at].strip(), arguments=arguments, called=True)

    @classmethod
    def parse(cls, path: Optional[str]) -> List[RawSegment]:
        return [cls.parse_segment(raw) for raw in cls.tokenize(path)]


def tokenize(path: Optional[str]) -> List[str]:
    return PathParser.tokenize(path)


def parse_segment(raw: str) -> RawSegment:
    return PathParser.parse_segment(raw)
