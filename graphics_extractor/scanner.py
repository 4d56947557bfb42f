"""
Span Scanner for free-form log text.

Finds every top-level, balanced {...} region in a block of text without
tokenizing the surrounding prose. Quote characters open string literals so
that braces inside quoted values (e.g. title: "}") never shift a boundary.

Usage:
    from graphics_extractor.scanner import scan_spans

    spans = scan_spans('log {a: 1} more {b: "}"}')
    # [Span(start=4, end=9), Span(start=16, end=23)]
"""

from dataclasses import dataclass
from typing import Iterator

_QUOTES = ('"', "'")


@dataclass(frozen=True)
class Span:
    """A top-level brace region; end is the offset of the closing brace."""
    start: int
    end: int

    def slice(self, text: str) -> str:
        return text[self.start:self.end + 1]


def iter_spans(text: str) -> Iterator[Span]:
    """
    Yield top-level brace spans in order of their start offset.

    Never raises. An unclosed span or unterminated string at the end of the
    input yields nothing for that region, and a stray closing brace outside
    any span is ignored.
    """
    if not text:
        return

    depth = 0
    start = -1
    quote = None
    escaped = False

    for i, char in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue

        if char in _QUOTES:
            quote = char
        elif char == "{":
            depth += 1
            if depth == 1:
                start = i
        elif char == "}":
            if depth == 0:
                continue
            depth -= 1
            if depth == 0:
                yield Span(start, i)


def scan_spans(text: str) -> list[Span]:
    """Return all top-level brace spans in text."""
    return list(iter_spans(text))
