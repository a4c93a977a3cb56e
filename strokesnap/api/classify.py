"""POST /api/classify and /api/snap."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends

from strokesnap.config import Settings
from strokesnap.dependencies import check_stroke_length, get_settings
from strokesnap.engine.classifier import analyze_shape
from strokesnap.models.requests import SnapRequest, StrokeRequest
from strokesnap.models.responses import ClassifyResponse, SnapResponse
from strokesnap.svg.primitives import analysis_to_element
from strokesnap.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/classify", response_model=ClassifyResponse)
async def classify(
    req: StrokeRequest,
    cfg: Settings = Depends(get_settings),
) -> ClassifyResponse:
    check_stroke_length(len(req.points), cfg)
    start = time.perf_counter()

    analysis = analyze_shape(req.points)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Classified %d points as %s in %.1fms",
        len(req.points),
        analysis.type,
        elapsed,
    )
    return ClassifyResponse(
        analysis=analysis,
        point_count=len(req.points),
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/snap", response_model=SnapResponse)
async def snap(
    req: SnapRequest,
    cfg: Settings = Depends(get_settings),
) -> SnapResponse:
    check_stroke_length(len(req.points), cfg)

    analysis = analyze_shape(req.points)
    element = analysis_to_element(analysis, req.style)
    if element is None:
        logger.info("Stroke of %d points kept as drawn", len(req.points))
        return SnapResponse(analysis=analysis)

    logger.info("Stroke of %d points replaced by <%s>", len(req.points), element["tag"])
    return SnapResponse(
        analysis=analysis,
        replaced=True,
        element=element,
        svg=serialize_svg([element], req.canvas_width, req.canvas_height),
    )
