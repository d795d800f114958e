"""Clustering Service - drives a K-Means run over the current dataset."""
import numpy as np

from core.point import Centroid
from core.run_state import RunState
from services.dataset import DatasetService
from utils.initialization import InitStrategy, initialize_centroids
from utils.kmeans import assign_points, compute_inertia, compute_silhouette, kmeans_step

SAMPLING_STRATEGIES = (InitStrategy.RANDOM, InitStrategy.FARTHEST_FIRST, InitStrategy.KMEANS_PP)


class ClusteringService:
    """
    Run controller owning the dataset and a single RunState.

    Every action runs to completion and leaves the state consistent:
    UNINITIALIZED -> RUNNING -> CONVERGED, with reset() and a dataset change
    returning to UNINITIALIZED from anywhere.
    """

    def __init__(self, config, points=None, rng=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.RANDOM_SEED)
        self.dataset_service = DatasetService(config)

        # Selection
        self.n_clusters = config.DEFAULT_CLUSTERS
        self.strategy = config.DEFAULT_STRATEGY

        # State
        self.state = RunState()
        if points is None:
            points = self.dataset_service.generate_points(rng=self.rng)
        self.points = list(points)

    # =========================================================================
    # Selection & Dataset
    # =========================================================================

    def select(self, n_clusters=None, strategy=None):
        """
        Update the k/strategy selection. A change discards the current run.

        Raises:
            ValueError: If n_clusters is not an integer
        """
        changed = False

        if n_clusters is not None:
            try:
                n_clusters = int(n_clusters)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid number of clusters: {n_clusters!r}")
            if n_clusters != self.n_clusters:
                self.n_clusters = n_clusters
                changed = True

        if isinstance(strategy, InitStrategy):
            strategy = strategy.value
        if strategy is not None and strategy != self.strategy:
            self.strategy = strategy
            changed = True

        if changed:
            self.state.clear()

        return changed

    def set_points(self, points):
        """Replace the dataset. Always resets the run."""
        self.points = list(points)
        self.state.clear()
        return self.points

    def new_dataset(self, count=None):
        """Generate a fresh random dataset and reset the run."""
        points = self.dataset_service.generate_points(count, rng=self.rng)
        return self.set_points(points)

    # =========================================================================
    # Run Actions
    # =========================================================================

    def initialize_clusters(self, n_clusters=None, strategy=None):
        """
        Pick initial centroids with the selected strategy.

        Returns:
            List of initial centroids (empty for Manual, unknown strategies,
            k <= 0 or an empty dataset)
        """
        self.select(n_clusters, strategy)

        if InitStrategy.parse(self.strategy) in SAMPLING_STRATEGIES and 0 < len(self.points) < self.n_clusters:
            print(f"   WARNING: k={self.n_clusters} exceeds {len(self.points)} points, "
                  f"using {len(self.points)} centroids")

        centroids = initialize_centroids(self.points, self.n_clusters, self.strategy, self.rng)

        if centroids:
            self.state.start(centroids)
        else:
            self.state.clear()
            if InitStrategy.parse(self.strategy) is None:
                print(f"   WARNING: Unknown initialization strategy '{self.strategy}', no centroids")

        return list(centroids)

    def place_centroid(self, x, y):
        """
        Add a hand-placed centroid before the first step.

        Only the Manual strategy accepts placements, up to the selected k.

        Returns:
            The new Centroid, or None when the placement is rejected
        """
        if InitStrategy.parse(self.strategy) is not InitStrategy.MANUAL:
            print(f"   WARNING: Centroids are placed by hand only with the Manual strategy, not '{self.strategy}'")
            return None
        if self.state.iteration_count > 0 or self.state.converged:
            print("   WARNING: Centroids can only be placed before the first step")
            return None
        if len(self.state.centroids) >= self.n_clusters:
            print(f"   WARNING: All {self.n_clusters} centroids already placed")
            return None

        centroid = Centroid(float(x), float(y))
        self.state.centroids.append(centroid)
        self.state.clusters = []
        return centroid

    def step_once(self):
        """
        Perform one K-Means iteration.

        Returns:
            True if a step was performed, False if the run is not stepping
        """
        if self.state.converged or not self.state.centroids:
            return False

        previous = self.state.centroids
        new_centroids, clusters = kmeans_step(self.points, previous)

        if self.config.REFRESH_CLUSTERS_EVERY_STEP or self.state.iteration_count == 0:
            self.state.clusters = clusters

        self.state.centroids = new_centroids
        self.state.iteration_count += 1

        if new_centroids == previous:
            self.state.converged = True

        return True

    def run_to_convergence(self):
        """
        Step until the centroids stop moving or the iteration cap is hit.

        Returns:
            Number of steps performed by this call
        """
        if not self.state.centroids:
            return 0

        max_iterations = self.config.MAX_ITERATIONS
        steps = 0
        while not self.state.converged and steps < max_iterations:
            self.step_once()
            steps += 1

        if not self.state.converged:
            print(f"   WARNING: No convergence after {max_iterations} iterations, stopping")
            self.state.converged = True

        return steps

    def reset(self):
        """Discard the run and restore the default selection. The dataset is kept."""
        self.state.clear()
        self.n_clusters = self.config.DEFAULT_CLUSTERS

    # =========================================================================
    # Views
    # =========================================================================

    def get_assignments(self):
        """Nearest-centroid index for every point under the current centroids."""
        return [int(label) for label in assign_points(self.points, self.state.centroids)]

    def get_display(self):
        """Everything a chart needs to draw the current run."""
        converged = self.state.converged
        points = [p.to_dict() for p in self.points]
        centroids = [c.to_dict() for c in self.state.centroids]

        series = [{
            'label': "Converged Data" if converged else "Random Dataset",
            'data': points,
        }]
        if centroids:
            series.append({'label': "Centroids", 'data': centroids})

        return {
            'points': points,
            'centroids': centroids,
            'converged': converged,
            'status': self.state.status.value,
            'iteration_count': self.state.iteration_count,
            'clusters': [[p.to_dict() for p in group] for group in self.state.clusters],
            'n_clusters': self.n_clusters,
            'strategy': self.strategy,
            'series': series,
            'bounds': {
                'x': [self.config.COORD_MIN, self.config.COORD_MAX],
                'y': [self.config.COORD_MIN, self.config.COORD_MAX],
            },
        }

    def get_stats(self):
        """Return statistics about the current run."""
        centroids = self.state.centroids
        return {
            'status': self.state.status.value,
            'num_points': len(self.points),
            'num_clusters': len(centroids),
            'iteration_count': self.state.iteration_count,
            'converged': self.state.converged,
            'cluster_sizes': self.state.get_cluster_sizes(),
            'inertia': round(compute_inertia(self.points, centroids), 4),
            'silhouette': compute_silhouette(self.points, centroids) if centroids else None,
        }
