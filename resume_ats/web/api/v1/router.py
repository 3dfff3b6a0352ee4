"""Top-level v1 API router."""

from __future__ import annotations

from fastapi import APIRouter

from .endpoints.ats import router as ats_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(ats_router)
