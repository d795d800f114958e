"""Point and Centroid models - coordinate pairs on the 2-D plane."""
from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    """A raw data point."""

    x: float
    y: float

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}


class Centroid(NamedTuple):
    """
    Computed representative of a cluster. Index in a run defines cluster identity.

    Equality is by coordinates, so Centroid(0, 0) == Point(0, 0); compare
    types explicitly where the distinction matters.
    """

    x: float
    y: float

    @classmethod
    def from_coords(cls, coords) -> Centroid:
        """Build a centroid by value from any (x, y) pair."""
        return cls(float(coords[0]), float(coords[1]))

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y}
