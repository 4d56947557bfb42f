from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import re

from .models import ExtractionResult

_SAFE_ID = re.compile(r"[^A-Za-z0-9_.-]+")


@dataclass
class GraphicsPaths:
    document_id: str
    graphics_dir: Path
    graphics_file: Path


class ExtractionStorage:
    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def build_paths(self, source: str) -> GraphicsPaths:
        document_id = _SAFE_ID.sub("_", Path(source).stem).strip("_") or "text"
        timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
        graphics_dir = self.data_dir / document_id / "graphics"
        graphics_dir.mkdir(parents=True, exist_ok=True)
        graphics_file = graphics_dir / f"{document_id}_{timestamp}.json"
        return GraphicsPaths(
            document_id=document_id,
            graphics_dir=graphics_dir,
            graphics_file=graphics_file,
        )

    def save(self, result: ExtractionResult) -> GraphicsPaths:
        paths = self.build_paths(result.source)
        result.save(str(paths.graphics_file))
        return paths
