"""Data Generator - generates synthetic point datasets on the display plane."""
import numpy as np
import pandas as pd


class DataGenerator:
    """Generates points with integer coordinates uniformly inside square bounds."""

    def __init__(self, coord_min=-10, coord_max=10):
        self.coord_min = coord_min
        self.coord_max = coord_max

    def generate(self, n=100, seed=None, rng=None):
        """
        Generate n random points.

        Args:
            n: Number of points to generate
            seed: Random seed for reproducibility (ignored when rng is given)
            rng: Optional numpy Generator to draw from

        Returns:
            DataFrame with id, x, y columns
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        n = max(0, int(n))

        xs = rng.integers(self.coord_min, self.coord_max + 1, size=n)
        ys = rng.integers(self.coord_min, self.coord_max + 1, size=n)

        df = pd.DataFrame({
            "id": np.arange(1, n + 1),
            "x": xs.astype(float),
            "y": ys.astype(float),
        })

        return df
