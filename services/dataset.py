"""Dataset Service - supplies the point set a run clusters."""
from core.point import Point
from utils.data_generator import DataGenerator


class DatasetService:
    """Service for generating point datasets."""

    def __init__(self, config):
        self.config = config
        self.data_generator = DataGenerator(config.COORD_MIN, config.COORD_MAX)

    def generate_points(self, count=None, rng=None):
        """
        Generate a random dataset.

        Args:
            count: Number of points (defaults to Config.NUM_POINTS)
            rng: Random source to draw from

        Returns:
            List of Point objects
        """
        count = self.config.NUM_POINTS if count is None else count
        df = self.data_generator.generate(n=count, rng=rng)
        return [Point(float(row['x']), float(row['y'])) for _, row in df.iterrows()]


def generate_dataset(n, rng=None, coord_min=-10, coord_max=10):
    """Generate n points with integer coordinates in [coord_min, coord_max]."""
    df = DataGenerator(coord_min, coord_max).generate(n=n, rng=rng)
    return [Point(float(x), float(y)) for x, y in zip(df['x'], df['y'])]
