"""API error helpers and exception handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return _envelope(self.code, self.message, self.details)


def _envelope(code: str, message: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors (malformed resume payloads) to the contract shape."""
    return JSONResponse(
        status_code=400,
        content=_envelope(
            "BAD_REQUEST",
            "Invalid resume payload",
            {"errors": [_plain_error(e) for e in exc.errors()]},
        ),
    )


def _plain_error(error: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "loc": [str(part) for part in error.get("loc", ())],
        "msg": str(error.get("msg", "")),
        "type": str(error.get("type", "")),
    }
