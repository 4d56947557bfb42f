"""
Data Models for Graphics Extraction

Defines:
1. MatchRule - Which policy rule selected a span
2. GraphicsMatch - One emitted graphics object with its source span
3. ExtractionStats - Counters describing one extraction run
4. ExtractionResult - Complete, serializable extraction output
5. ExtractRequest / ExtractResponse - HTTP API payloads

Graphics objects themselves stay plain dicts (or whatever value the log
carried); no schema is imposed on points, rects, circles or title.

Usage:
    result = extractor.extract_detailed(log_text, source="app.log")
    result.objects          # [{"points": [...], "title": "..."}]
    result.save("graphics.json")
"""

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class MatchRule(str, Enum):
    """How a span was recognized as a graphics object."""
    GRAPHICS_KEY = "graphics_key"  # {graphics: {...}} wrapper, field unwrapped
    MARKER = "marker"              # "...graphics {...}", object emitted as-is


class GraphicsMatch(BaseModel):
    """A graphics object together with the span it was read from."""
    start: int = Field(
        ...,
        description="Offset of the opening brace in the source text",
        ge=0,
    )
    end: int = Field(
        ...,
        description="Offset of the closing brace in the source text (inclusive)",
        ge=0,
    )
    rule: MatchRule = Field(
        ...,
        description="Policy rule that selected this span",
    )
    graphics: Any = Field(
        None,
        description="The emitted graphics object",
    )


class ExtractionStats(BaseModel):
    """Statistics about one extraction run."""
    spans_found: int = 0
    spans_parsed: int = 0
    spans_failed: int = 0
    spans_unmatched: int = 0
    objects_found: int = 0


class ExtractionResult(BaseModel):
    """
    Complete result of extracting graphics objects from one log text.

    Matches are ordered by their start offset in the source text.
    """
    source: str = Field(
        "<text>",
        description="Label of the input (file path or '<text>')",
    )
    matches: list[GraphicsMatch] = Field(
        default_factory=list,
        description="Emitted graphics objects with span information",
    )
    stats: ExtractionStats = Field(
        default_factory=ExtractionStats,
        description="Extraction statistics",
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="When extraction was performed",
    )

    @property
    def objects(self) -> list[Any]:
        return [match.graphics for match in self.matches]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save extraction result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "ExtractionResult":
        """Load extraction result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


class ExtractRequest(BaseModel):
    log_text: str


class ExtractResponse(BaseModel):
    objects: list[Any] = Field(default_factory=list)
    stats: ExtractionStats = Field(default_factory=ExtractionStats)
