from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.compliance_engine import ComplianceScanner
from common.compliance_engine.config import ScanConfig
from common.logging_config import configure_logging
from common.settings import AppSettings, get_settings

from .compliance import router as compliance_router
from .gemini import router as gemini_router


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    scanner: Optional[ComplianceScanner] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Catalog problems (e.g. duplicate clause ids) surface here, before any request is served.
    scanner = scanner or ComplianceScanner.from_config(ScanConfig.from_settings(settings))
    logger.info(
        "Loaded regulation catalog %s: %d regulations, %d clauses",
        scanner.catalog.version,
        len(scanner.catalog.regulations),
        scanner.catalog.clause_count(),
    )

    app = FastAPI(title="Compliance Suite API")
    app.state.settings = settings
    app.state.scanner = scanner

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body."})

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    app.include_router(compliance_router, prefix="/api")
    app.include_router(gemini_router, prefix="/api")
    return app


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
