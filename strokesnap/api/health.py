"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from strokesnap import __version__
from strokesnap.models.responses import HealthResponse
from strokesnap.models.shape import ShapeKind

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        shape_kinds=[kind.value for kind in ShapeKind],
    )
