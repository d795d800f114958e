"""Geometry helpers for points on the plane."""
from __future__ import annotations

import numpy as np


def to_array(coords) -> np.ndarray:
    """Convert a sequence of (x, y) pairs to an (n, 2) float array."""
    arr = np.asarray([[c[0], c[1]] for c in coords], dtype=float)
    return arr.reshape(-1, 2)


def distance_matrix(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Euclidean distances of shape (n_points, n_centers)."""
    dx = points[:, None, 0] - centers[None, :, 0]
    dy = points[:, None, 1] - centers[None, :, 1]
    return np.hypot(dx, dy)


def min_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Distance from every point to its nearest center."""
    return distance_matrix(points, centers).min(axis=1)
