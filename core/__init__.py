"""Domain models for the clustering engine."""
from core.point import Point, Centroid
from core.run_state import RunState, RunStatus

__all__ = [
    "Point",
    "Centroid",
    "RunState",
    "RunStatus",
]
