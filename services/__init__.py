"""Service classes driving clustering runs."""
from services.clustering import ClusteringService
from services.dataset import DatasetService, generate_dataset
from services.runner import ClusteringRunner

__all__ = [
    "ClusteringService",
    "DatasetService",
    "generate_dataset",
    "ClusteringRunner",
]
