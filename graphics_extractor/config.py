from dataclasses import dataclass
import os
import re

from .policy import DEFAULT_GRAPHICS_KEY, DEFAULT_MARKER_WORD
from .relaxed_json import DEFAULT_MAX_DEPTH

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass
class ExtractorConfig:
    graphics_key: str = DEFAULT_GRAPHICS_KEY
    marker_word: str = DEFAULT_MARKER_WORD
    max_depth: int = DEFAULT_MAX_DEPTH
    data_dir: str = "data/graphics_extractor"

    def __post_init__(self) -> None:
        if not _IDENTIFIER.fullmatch(self.marker_word or ""):
            raise ValueError(f"marker_word must be an identifier, got {self.marker_word!r}")
        if not self.graphics_key:
            raise ValueError("graphics_key must not be empty")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        return cls(
            graphics_key=os.environ.get("GRAPHICS_EXTRACTOR_KEY", cls.graphics_key),
            marker_word=os.environ.get("GRAPHICS_EXTRACTOR_MARKER", cls.marker_word),
            max_depth=_int("GRAPHICS_EXTRACTOR_MAX_DEPTH", cls.max_depth),
            data_dir=os.environ.get("GRAPHICS_EXTRACTOR_DATA_DIR", cls.data_dir),
        )
