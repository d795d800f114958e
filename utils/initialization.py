"""
Centroid initialization strategies.

Every strategy takes the dataset, the requested cluster count and an injected
random source, and returns a list of Centroid copies. A strategy never fails:
an empty dataset, k <= 0, the Manual strategy or an unknown strategy name all
give an empty list. k larger than the dataset is clamped to its size.

The random source is a numpy Generator or any object offering the same
``permutation``, ``integers`` and ``random`` methods.
"""
from __future__ import annotations

from enum import Enum

import numpy as np

from core.point import Centroid, Point
from utils.geometry import min_distances, to_array


class InitStrategy(str, Enum):
    RANDOM = "Random"
    FARTHEST_FIRST = "Farthest-First"
    KMEANS_PP = "KMeans++"
    MANUAL = "Manual"

    @classmethod
    def parse(cls, value) -> InitStrategy | None:
        """Return the matching strategy, or None for an unknown name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def _init_random(X: np.ndarray, k: int, rng) -> list[int]:
    order = rng.permutation(len(X))
    return [int(i) for i in order[:k]]


def _init_farthest_first(X: np.ndarray, k: int, rng) -> list[int]:
    chosen = [int(rng.integers(len(X)))]
    while len(chosen) < k:
        distances = min_distances(X, X[chosen])
        distances[chosen] = -np.inf
        # argmax returns the first index among ties
        chosen.append(int(np.argmax(distances)))
    return chosen


def _init_kmeans_plus_plus(X: np.ndarray, k: int, rng) -> list[int]:
    """
    Sample each next centroid with probability proportional to the
    (non-squared) distance to the nearest centroid chosen so far.
    """
    chosen = [int(rng.integers(len(X)))]
    while len(chosen) < k:
        distances = min_distances(X, X[chosen])
        distances[chosen] = 0.0
        cumulative = np.cumsum(distances)
        total = cumulative[-1]
        if total <= 0:
            # Remaining points all coincide with chosen centroids
            break
        target = rng.random() * total
        idx = int(np.searchsorted(cumulative, target, side='right'))
        chosen.append(min(idx, len(X) - 1))
    return chosen


_STRATEGIES = {
    InitStrategy.RANDOM: _init_random,
    InitStrategy.FARTHEST_FIRST: _init_farthest_first,
    InitStrategy.KMEANS_PP: _init_kmeans_plus_plus,
}


def initialize_centroids(points: list[Point], k: int, strategy, rng) -> list[Centroid]:
    """
    Pick initial centroids for a run.

    Args:
        points: Dataset to pick from
        k: Requested number of centroids
        strategy: InitStrategy or its string value
        rng: Random source

    Returns:
        List of min(k, len(points)) centroids, or an empty list
    """
    strategy = InitStrategy.parse(strategy)
    init = _STRATEGIES.get(strategy)
    if init is None or not points or k <= 0:
        return []

    X = to_array(points)
    indices = init(X, min(k, len(points)), rng)
    return [Centroid.from_coords(points[i]) for i in indices]
