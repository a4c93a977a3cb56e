"""strokesnap shape classification engine."""

from strokesnap.engine.classifier import analyze_shape

__all__ = [
    "analyze_shape",
]
