"""
Graphics Extractor - find graphics objects embedded in debug logs

Scans free-form log text for object literals describing drawable
primitives (points, rects, circles, title) and returns them as plain
Python values, in order of appearance.

Quick Start:
    from graphics_extractor import get_graphics_objects_from_log_string

    log = 'INFO render {graphics: {points: [{x: 1, y: 2}], title: "demo"}}'
    get_graphics_objects_from_log_string(log)
    # [{"points": [{"x": 1, "y": 2}], "title": "demo"}]
"""

__version__ = "1.0.0"

from .config import ExtractorConfig
from .exceptions import (
    GraphicsExtractionError,
    RelaxedJSONError,
    LogSourceError,
    LogSourceNotFoundError,
    format_error_chain,
)
from .extractor import GraphicsExtractor, get_graphics_objects_from_log_string
from .models import (
    ExtractionResult,
    ExtractionStats,
    GraphicsMatch,
    MatchRule,
)
from .policy import decide
from .relaxed_json import parse_relaxed
from .scanner import Span, scan_spans
from .service import GraphicsExtractionService

__all__ = [
    "__version__",
    "ExtractorConfig",
    "GraphicsExtractionError",
    "RelaxedJSONError",
    "LogSourceError",
    "LogSourceNotFoundError",
    "format_error_chain",
    "GraphicsExtractor",
    "get_graphics_objects_from_log_string",
    "ExtractionResult",
    "ExtractionStats",
    "GraphicsMatch",
    "MatchRule",
    "decide",
    "parse_relaxed",
    "Span",
    "scan_spans",
    "GraphicsExtractionService",
]
