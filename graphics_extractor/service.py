import logging
from pathlib import Path

from .config import ExtractorConfig
from .exceptions import LogSourceNotFoundError
from .extractor import GraphicsExtractor
from .models import ExtractionResult
from .storage import ExtractionStorage

logger = logging.getLogger(__name__)


class GraphicsExtractionService:
    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or ExtractorConfig.from_env()
        self.extractor = GraphicsExtractor(self.config)
        self.storage = ExtractionStorage(self.config.data_dir)

    def extract_text(self, text: str, source: str = "<text>") -> ExtractionResult:
        return self.extractor.extract_detailed(text, source=source)

    def extract_file(self, log_path: str) -> ExtractionResult:
        path = Path(log_path)
        if not path.is_file():
            raise LogSourceNotFoundError(str(log_path))
        text = path.read_text(encoding="utf-8", errors="replace")
        logger.info(f"Scanning {path} ({len(text)} characters)")
        return self.extract_text(text, source=str(log_path))

    def save(self, result: ExtractionResult) -> str:
        paths = self.storage.save(result)
        return str(paths.graphics_file)

    def extract_and_save(self, log_path: str) -> tuple[ExtractionResult, str]:
        result = self.extract_file(log_path)
        return result, self.save(result)
