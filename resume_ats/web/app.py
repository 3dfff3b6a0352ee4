"""FastAPI app entrypoint for the ATS scoring API."""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..domain.scoring_config import ScoringConfig
from ..observability import ScoringObserver
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, validation_error_handler

logger = logging.getLogger("resume_ats.web.api")


def create_app(config: Optional[ScoringConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without an explicit *config*, scoring configuration is loaded from YAML
    on the first scoring request.
    """
    observer = ScoringObserver(verbose=os.getenv("RESUME_ATS_VERBOSE", "") == "1")

    app = FastAPI(title="Resume ATS API", version="0.1.0")
    app.state.scoring_config = config
    app.state.observer = observer
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    uvicorn.run("resume_ats.web.app:create_app", factory=True, host="127.0.0.1", port=8000)
