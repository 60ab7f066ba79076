"""Thread pool used for per-unit analysis."""

from .pool import AnalysisPool

__all__ = [
    "AnalysisPool",
]
