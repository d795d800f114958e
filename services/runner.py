"""Clustering Runner - console walkthrough of a full K-Means run."""
from services.clustering import ClusteringService


class ClusteringRunner:
    """Main orchestrator that runs one dataset from initialization to convergence."""

    def __init__(self, config, service=None):
        self.config = config
        self.service = service or ClusteringService(config)
        self.stats = {}

    def generate_dataset(self, count=None):
        """Generate a new dataset."""
        count = count or self.config.NUM_POINTS

        print(f"[1] Generating {count} points...")
        points = self.service.new_dataset(count)
        print(f"    OK: {len(points)} points generated")

        return points

    def initialize(self, n_clusters=None, strategy=None):
        """Pick the initial centroids."""
        n_clusters = n_clusters or self.service.n_clusters
        strategy = strategy or self.service.strategy

        print(f"[2] Initializing {n_clusters} centroids ({strategy})...")
        centroids = self.service.initialize_clusters(n_clusters, strategy)
        for i, c in enumerate(centroids):
            print(f"   Centroid {i}: ({c.x:.2f}, {c.y:.2f})")
        print(f"    OK: {len(centroids)} centroids placed")

        return centroids

    def run(self, n_clusters=None, strategy=None, count=None):
        """Execute the full pipeline and print a summary."""
        print("\n" + "=" * 50)
        print("        K-MEANS CLUSTERING")
        print("=" * 50)
        print(f"   Config: {count or self.config.NUM_POINTS} points, "
              f"max {self.config.MAX_ITERATIONS} iterations")
        print("=" * 50 + "\n")

        self.generate_dataset(count)
        centroids = self.initialize(n_clusters, strategy)

        if not centroids:
            print("[3] Nothing to run (no centroids)")
            return self.service.get_stats()

        print("[3] Running to convergence...")
        steps = self.service.run_to_convergence()
        print(f"    OK: {steps} iterations")

        self.print_summary()
        return self.stats

    def print_summary(self):
        """Print execution summary."""
        self.stats = self.service.get_stats()
        stats = self.stats

        print("\n" + "=" * 50)
        print("                    SUMMARY")
        print("=" * 50)
        print(f"✓ Points: {stats['num_points']}")
        print(f"✓ Clusters: {stats['num_clusters']}")
        print(f"✓ Iterations: {stats['iteration_count']}")
        print(f"✓ Cluster Sizes: {stats['cluster_sizes']}")
        print(f"✓ Inertia: {stats['inertia']}")
        if stats['silhouette'] is not None:
            print(f"✓ Silhouette: {stats['silhouette']:.3f}")
        for i, c in enumerate(self.service.state.centroids):
            print(f"   Cluster {i}: ({c.x:.2f}, {c.y:.2f})")
        print("=" * 50 + "\n")
