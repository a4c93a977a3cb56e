"""POST /api/simplify."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from strokesnap.config import Settings
from strokesnap.dependencies import check_stroke_length, get_settings
from strokesnap.models.requests import SimplifyRequest
from strokesnap.models.responses import SimplifyResponse
from strokesnap.models.shape import Point
from strokesnap.utils.contour import rdp_simplify

router = APIRouter()


@router.post("/simplify", response_model=SimplifyResponse)
async def simplify(
    req: SimplifyRequest,
    cfg: Settings = Depends(get_settings),
) -> SimplifyResponse:
    check_stroke_length(len(req.points), cfg)

    simplified = rdp_simplify(req.points, req.epsilon)

    return SimplifyResponse(
        points=[Point(x=float(x), y=float(y)) for x, y in simplified],
        original_count=len(req.points),
        simplified_count=len(simplified),
    )
