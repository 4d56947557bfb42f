"""
Relaxed JSON Parser

Parses the object literals found in debug logs with dirtyjson, which accepts
a superset of JSON:

- object keys may be bare words as well as double- or single-quoted strings
- string values may be single- or double-quoted
- a trailing comma before } or ] is tolerated
- // and /* */ comments are skipped

dirtyjson hands back AttributedDict/AttributedList containers; they are
converted to plain dict and list here. On top of dirtyjson the parser
rejects values that cannot be written back out as UTF-8 JSON (non-finite
numbers, unpaired surrogates) and nesting deeper than max_depth.

Any problem raises RelaxedJSONError.

Usage:
    from graphics_extractor.relaxed_json import parse_relaxed

    parse_relaxed("{points: [{x: 1, y: 2}], title: 'relaxed'}")
    # {"points": [{"x": 1, "y": 2}], "title": "relaxed"}
"""

from __future__ import annotations

import math
import re
from typing import Any

import dirtyjson

from .exceptions import RelaxedJSONError

DEFAULT_MAX_DEPTH = 200

_SURROGATE = re.compile("[\ud800-\udfff]")


def _check_string(value: str, text: str) -> str:
    match = _SURROGATE.search(value)
    if match:
        raise RelaxedJSONError(f"Unpaired surrogate {match.group()!r} in string", 0, text)
    return value


def _to_plain(value: Any, text: str, max_depth: int, depth: int = 0) -> Any:
    if isinstance(value, dict):
        if depth >= max_depth:
            raise RelaxedJSONError(f"Nesting deeper than {max_depth} levels", 0, text)
        return {
            _check_string(key, text): _to_plain(item, text, max_depth, depth + 1)
            for key, item in value.items()
        }
    # Expressions such as "()" come back from dirtyjson as tuples.
    if isinstance(value, (list, tuple)):
        if depth >= max_depth:
            raise RelaxedJSONError(f"Nesting deeper than {max_depth} levels", 0, text)
        return [_to_plain(item, text, max_depth, depth + 1) for item in value]
    if isinstance(value, str):
        return _check_string(value, text)
    if isinstance(value, float) and not math.isfinite(value):
        raise RelaxedJSONError(f"Non-finite number {value!r}", 0, text)
    return value


def parse_relaxed(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """
    Parse relaxed JSON text into a Python value.

    Only the first value in text is read; spans handed over by the scanner
    end at their closing brace, so nothing follows it.

    Args:
        text: The text to parse (typically one scanned span).
        max_depth: Maximum nesting of objects and arrays.

    Returns:
        dict, list, str, int, float, bool or None.

    Raises:
        RelaxedJSONError: On any syntax violation, or a value that cannot be
            serialised as UTF-8 JSON.
    """
    if not isinstance(text, str):
        raise RelaxedJSONError("Input is not a string", 0)
    try:
        value = dirtyjson.loads(text)
    except dirtyjson.Error as e:
        message = e.msg.replace("%r", repr(text[e.pos:e.pos + 1]))
        raise RelaxedJSONError(message, e.pos, text) from e
    except RecursionError as e:
        raise RelaxedJSONError("Nesting too deep", 0, text) from e
    except (ValueError, ArithmeticError, TypeError) as e:
        # dirtyjson evaluates arithmetic such as "1+2"; its own errors
        # (bad octal literals, unterminated comments) surface as ValueError.
        raise RelaxedJSONError(f"Invalid value: {e}", 0, text) from e
    return _to_plain(value, text, max_depth)
