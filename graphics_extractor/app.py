from fastapi import FastAPI, HTTPException

from .config import ExtractorConfig
from .models import ExtractRequest, ExtractResponse
from .service import GraphicsExtractionService


def create_app(config: ExtractorConfig | None = None) -> FastAPI:
    service = GraphicsExtractionService(config=config)
    app = FastAPI(
        title="Graphics Extractor Service",
        version="1.0.0",
        description="Extract graphics objects embedded in debug log text.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/extract", response_model=ExtractResponse)
    def extract(request: ExtractRequest) -> ExtractResponse:
        try:
            result = service.extract_text(request.log_text, source="<request>")
            return ExtractResponse(objects=result.objects, stats=result.stats)
        except Exception as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app


app = create_app()
