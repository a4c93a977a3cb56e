"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException

from strokesnap.config import Settings, settings


def get_settings() -> Settings:
    return settings


def check_stroke_length(point_count: int, cfg: Settings) -> None:
    """Reject strokes longer than the configured cap before any geometry runs."""
    if point_count > cfg.max_stroke_points:
        raise HTTPException(
            status_code=422,
            detail=f"Stroke has {point_count} points; at most {cfg.max_stroke_points} accepted",
        )
