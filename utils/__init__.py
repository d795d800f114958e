"""Clustering algorithms and dataset generation."""
from utils.initialization import InitStrategy, initialize_centroids
from utils.kmeans import kmeans_step, assign_points
from utils.data_generator import DataGenerator

__all__ = [
    "InitStrategy",
    "initialize_centroids",
    "kmeans_step",
    "assign_points",
    "DataGenerator",
]
