"""K-Means Clustering - Main Entry Point"""
from config import Config
from services.runner import ClusteringRunner


if __name__ == "__main__":
    runner = ClusteringRunner(Config)
    runner.run()
