"""KMeans step - one Lloyd iteration plus run quality measures."""
from __future__ import annotations

import numpy as np
from sklearn.metrics import silhouette_score

from core.point import Centroid, Point
from utils.geometry import distance_matrix, to_array


def assign_points(points: list[Point], centroids: list[Centroid]) -> np.ndarray:
    """
    Index of the nearest centroid for every point.

    Ties go to the lowest centroid index.
    """
    if not points or not centroids:
        return np.zeros(0, dtype=int)
    distances = distance_matrix(to_array(points), to_array(centroids))
    return np.argmin(distances, axis=1)


def kmeans_step(points: list[Point], centroids: list[Centroid]) -> tuple[list[Centroid], list[list[Point]]]:
    """
    Perform one assignment + update pass.

    Args:
        points: Dataset
        centroids: Current centroids, index i is cluster i

    Returns:
        Tuple of (new centroids, groups of points assigned under the input centroids)
    """
    clusters: list[list[Point]] = [[] for _ in centroids]
    if not points or not centroids:
        return list(centroids), clusters

    labels = assign_points(points, centroids)
    for point, label in zip(points, labels):
        clusters[label].append(point)

    X = to_array(points)
    new_centroids = []
    for i, centroid in enumerate(centroids):
        if not clusters[i]:
            # Empty cluster keeps its position
            new_centroids.append(centroid)
            continue
        new_centroids.append(Centroid.from_coords(X[labels == i].mean(axis=0)))

    return new_centroids, clusters


def compute_inertia(points: list[Point], centroids: list[Centroid]) -> float:
    """Within-cluster sum of squared distances."""
    if not points or not centroids:
        return 0.0
    distances = distance_matrix(to_array(points), to_array(centroids))
    return float(np.sum(distances.min(axis=1) ** 2))


def compute_silhouette(points: list[Point], centroids: list[Centroid]) -> float | None:
    """Mean silhouette coefficient, or None when it is undefined."""
    labels = assign_points(points, centroids)
    n_labels = len(set(labels.tolist()))
    if n_labels < 2 or n_labels > len(points) - 1:
        return None
    return float(silhouette_score(to_array(points), labels))
