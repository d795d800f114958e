"""Run State model - the mutable state of a single K-Means run."""
from __future__ import annotations

from enum import Enum

from core.point import Centroid, Point


class RunStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    CONVERGED = "converged"


class RunState:
    """Centroids, displayed grouping and progress of one clustering run."""

    def __init__(self) -> None:
        self.centroids: list[Centroid] = []
        self.clusters: list[list[Point]] = []
        self.iteration_count: int = 0
        self.converged: bool = False

    @property
    def status(self) -> RunStatus:
        if not self.centroids:
            return RunStatus.UNINITIALIZED
        if self.converged:
            return RunStatus.CONVERGED
        return RunStatus.RUNNING

    @property
    def k(self) -> int:
        return len(self.centroids)

    def start(self, centroids: list[Centroid]) -> None:
        """Begin a run from freshly initialized centroids."""
        self.centroids = list(centroids)
        self.clusters = []
        self.iteration_count = 0
        self.converged = False

    def clear(self) -> None:
        """Return to the uninitialized state."""
        self.centroids = []
        self.clusters = []
        self.iteration_count = 0
        self.converged = False

    def get_cluster_sizes(self) -> list[int]:
        return [len(group) for group in self.clusters]

    def to_dict(self) -> dict:
        return {
            'status': self.status.value,
            'centroids': [c.to_dict() for c in self.centroids],
            'clusters': [[p.to_dict() for p in group] for group in self.clusters],
            'iteration_count': self.iteration_count,
            'converged': self.converged,
        }

    def __repr__(self) -> str:
        return (f"RunState(status={self.status.value}, k={self.k}, "
                f"iterations={self.iteration_count})")
