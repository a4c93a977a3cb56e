"""strokesnap: snap freehand strokes to lines, rectangles, triangles and circles."""

from strokesnap.engine.classifier import analyze_shape
from strokesnap.models.shape import ShapeAnalysis, ShapeKind
from strokesnap.utils.contour import rdp_simplify

__version__ = "0.1.0"

__all__ = [
    "analyze_shape",
    "rdp_simplify",
    "ShapeAnalysis",
    "ShapeKind",
]
