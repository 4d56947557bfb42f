"""
Graphics Extractor - pulls graphics objects out of free-form log text.

Pipeline (per call, no shared state):
    1. scanner.iter_spans      - top-level {...} regions, string aware
    2. relaxed_json.parse_relaxed - span text -> Python value
    3. policy.match_rule       - unwrap {graphics: ...}, accept marker form,
                                 or skip

Malformed spans are skipped silently (logged at DEBUG and counted in the
stats); extraction never raises for text input.

Usage:
    from graphics_extractor import get_graphics_objects_from_log_string

    log = 'graphics-debug:demo:graphics {"points": [{"x": 1, "y": 2}]} +0ms'
    get_graphics_objects_from_log_string(log)
    # [{"points": [{"x": 1, "y": 2}]}]
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import ExtractorConfig
from .exceptions import RelaxedJSONError
from .models import ExtractionResult, ExtractionStats, GraphicsMatch
from .policy import match_rule, select_graphics
from .relaxed_json import parse_relaxed
from .scanner import iter_spans

logger = logging.getLogger(__name__)


class GraphicsExtractor:
    """
    Extracts graphics objects embedded in log text.

    Instances hold only configuration, so one extractor can be shared
    across threads.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()

    def extract(self, text: str) -> list[Any]:
        """Return the graphics objects found in text, in order of appearance."""
        return self.extract_detailed(text).objects

    def extract_detailed(self, text: str, source: str = "<text>") -> ExtractionResult:
        """
        Extract graphics objects together with span positions and statistics.

        Args:
            text: Arbitrary log text. Non-string input is treated as empty.
            source: Label stored on the result (e.g. the log file path).

        Returns:
            ExtractionResult whose matches are ordered by span start offset.
        """
        stats = ExtractionStats()
        matches: list[GraphicsMatch] = []

        if not isinstance(text, str):
            return ExtractionResult(source=source, matches=matches, stats=stats)

        previous_end = -1
        for span in iter_spans(text):
            stats.spans_found += 1
            # The marker word can't straddle a "}", so the gap since the
            # previous span is enough for the lookback.
            preceding = text[previous_end + 1:span.start]
            previous_end = span.end

            try:
                value = parse_relaxed(span.slice(text), max_depth=self.config.max_depth)
            except RelaxedJSONError as e:
                stats.spans_failed += 1
                logger.debug(f"Skipping span {span.start}-{span.end}: {e}")
                continue
            stats.spans_parsed += 1

            rule = match_rule(
                value,
                preceding,
                graphics_key=self.config.graphics_key,
                marker_word=self.config.marker_word,
            )
            if rule is None:
                stats.spans_unmatched += 1
                continue

            matches.append(
                GraphicsMatch(
                    start=span.start,
                    end=span.end,
                    rule=rule,
                    graphics=select_graphics(value, rule, self.config.graphics_key),
                )
            )

        stats.objects_found = len(matches)
        logger.debug(
            f"{source}: {stats.objects_found} graphics objects from "
            f"{stats.spans_found} spans ({stats.spans_failed} malformed)"
        )
        return ExtractionResult(source=source, matches=matches, stats=stats)


def get_graphics_objects_from_log_string(text: str) -> list[Any]:
    """Return every graphics object embedded in text, in order of appearance."""
    return GraphicsExtractor().extract(text)
