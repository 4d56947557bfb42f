"""
Extraction policy: decide what a parsed span contributes to the output.

Rules, in priority order:
1. A dict carrying the graphics key emits the value of that key.
2. A span preceded by the marker word (e.g. "debug:graphics {...}") emits
   the parsed value unchanged.
3. Anything else emits nothing.

The marker lookback walks backwards over the preceding text; it does not
tokenize the log.
"""

from __future__ import annotations

from typing import Any, Optional

from .models import MatchRule

DEFAULT_GRAPHICS_KEY = "graphics"
DEFAULT_MARKER_WORD = "graphics"


def _is_identifier_char(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9")


def trailing_identifier(text: str) -> str:
    """Return the identifier run that ends text, ignoring trailing whitespace."""
    end = len(text)
    while end > 0 and text[end - 1].isspace():
        end -= 1
    start = end
    while start > 0 and _is_identifier_char(text[start - 1]):
        start -= 1
    return text[start:end]


def match_rule(
    parsed_value: Any,
    preceding_text: str,
    graphics_key: str = DEFAULT_GRAPHICS_KEY,
    marker_word: str = DEFAULT_MARKER_WORD,
) -> Optional[MatchRule]:
    """Return the rule that selects this span, or None for a non-match."""
    if isinstance(parsed_value, dict) and graphics_key in parsed_value:
        return MatchRule.GRAPHICS_KEY
    if trailing_identifier(preceding_text) == marker_word:
        return MatchRule.MARKER
    return None


def select_graphics(parsed_value: Any, rule: MatchRule, graphics_key: str = DEFAULT_GRAPHICS_KEY) -> Any:
    if rule is MatchRule.GRAPHICS_KEY:
        return parsed_value[graphics_key]
    return parsed_value


def decide(
    parsed_value: Any,
    preceding_text: str,
    graphics_key: str = DEFAULT_GRAPHICS_KEY,
    marker_word: str = DEFAULT_MARKER_WORD,
) -> list[Any]:
    """
    Apply the extraction policy to one parsed span.

    Args:
        parsed_value: The value parsed from the span.
        preceding_text: Input text before the span's opening brace.
        graphics_key: Wrapper key whose value is unwrapped.
        marker_word: Word that marks the following span as a graphics object.

    Returns:
        A list with zero or one emitted value. A list is used because None
        is itself a valid emitted value (e.g. {graphics: null}).
    """
    rule = match_rule(parsed_value, preceding_text, graphics_key, marker_word)
    if rule is None:
        return []
    return [select_graphics(parsed_value, rule, graphics_key)]
