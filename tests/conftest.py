"""Shared fixtures for the clustering engine tests."""
import numpy as np
import pytest

from config import Config
from core.point import Point


class ScriptedRandom:
    """
    Random source replaying fixed draws, for exact initializer scenarios.

    Draws that were not scripted come from a seeded numpy Generator.
    """

    def __init__(self, permutation=None, integers=(), randoms=()):
        self._permutation = permutation
        self._integers = list(integers)
        self._randoms = list(randoms)
        self._fallback = np.random.default_rng(0)

    def permutation(self, n):
        if self._permutation is None:
            return np.arange(n)
        return np.array(self._permutation)

    def integers(self, *args, **kwargs):
        if self._integers:
            return self._integers.pop(0)
        return self._fallback.integers(*args, **kwargs)

    def random(self, *args, **kwargs):
        if self._randoms:
            return self._randoms.pop(0)
        return self._fallback.random(*args, **kwargs)


class StubConfig(Config):
    NUM_POINTS = 20
    DEFAULT_CLUSTERS = 3
    DEFAULT_STRATEGY = "Random"
    RANDOM_SEED = 7
    MAX_ITERATIONS = 25
    REFRESH_CLUSTERS_EVERY_STEP = True


@pytest.fixture
def config():
    return StubConfig


@pytest.fixture
def two_pairs():
    return [Point(0, 0), Point(0, 1), Point(10, 10), Point(10, 11)]


@pytest.fixture
def pick_first_and_third():
    """Shuffle that puts (0,0) and (10,10) of two_pairs first."""
    return ScriptedRandom(permutation=[0, 2, 1, 3])


@pytest.fixture
def blobs():
    """Three well separated groups of points."""
    rng = np.random.default_rng(0)
    points = []
    for cx, cy in [(-6, -6), (0, 6), (6, -6)]:
        for x, y in rng.normal(loc=(cx, cy), scale=0.8, size=(15, 2)):
            points.append(Point(float(x), float(y)))
    return points
