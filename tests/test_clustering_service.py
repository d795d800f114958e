import pytest

import services.clustering as clustering_module
from conftest import ScriptedRandom
from core.point import Centroid, Point
from core.run_state import RunStatus
from services.clustering import ClusteringService


@pytest.fixture
def service(config, two_pairs, pick_first_and_third):
    return ClusteringService(config, points=two_pairs, rng=pick_first_and_third)


def test_starts_uninitialized(service):
    assert service.state.status is RunStatus.UNINITIALIZED
    assert service.state.centroids == []
    assert service.step_once() is False


def test_generates_default_dataset(config):
    service = ClusteringService(config)
    assert len(service.points) == config.NUM_POINTS


def test_two_pairs_scenario(service, two_pairs):
    centroids = service.initialize_clusters(2, "Random")

    assert centroids == [Centroid(0, 0), Centroid(10, 10)]
    assert service.state.status is RunStatus.RUNNING
    assert service.state.iteration_count == 0

    assert service.step_once() is True
    assert service.state.clusters == [[Point(0, 0), Point(0, 1)], [Point(10, 10), Point(10, 11)]]
    assert service.state.centroids == [Centroid(0, 0.5), Centroid(10, 10.5)]
    assert service.state.converged is False

    assert service.step_once() is True
    assert service.state.centroids == [Centroid(0, 0.5), Centroid(10, 10.5)]
    assert service.state.converged is True
    assert service.state.status is RunStatus.CONVERGED
    assert service.state.iteration_count == 2


def test_converged_run_ignores_further_steps(service):
    service.initialize_clusters(2, "Random")
    service.run_to_convergence()
    centroids = list(service.state.centroids)
    iterations = service.state.iteration_count

    assert service.step_once() is False
    assert service.run_to_convergence() == 0
    assert service.state.centroids == centroids
    assert service.state.iteration_count == iterations


def test_zero_clusters_is_a_no_op(service):
    assert service.initialize_clusters(0, "Random") == []
    assert service.step_once() is False
    assert service.run_to_convergence() == 0
    assert service.state.converged is False
    assert service.state.status is RunStatus.UNINITIALIZED


def test_unknown_strategy_leaves_run_empty(service, capsys):
    assert service.initialize_clusters(2, "Spectral") == []
    assert service.state.status is RunStatus.UNINITIALIZED
    assert "Unknown initialization strategy" in capsys.readouterr().out


def test_k_larger_than_dataset_is_clamped(service, capsys):
    centroids = service.initialize_clusters(10, "Random")
    assert len(centroids) == 4
    assert "exceeds 4 points" in capsys.readouterr().out


def test_manual_placement(service):
    assert service.initialize_clusters(2, "Manual") == []
    assert service.state.status is RunStatus.UNINITIALIZED

    service.place_centroid(1, 1)
    service.place_centroid(9, 9)
    assert service.state.status is RunStatus.RUNNING
    assert service.state.centroids == [Centroid(1, 1), Centroid(9, 9)]

    service.run_to_convergence()
    assert service.state.centroids == [Centroid(0, 0.5), Centroid(10, 10.5)]

    assert service.place_centroid(5, 5) is None
    assert len(service.state.centroids) == 2


def test_run_to_convergence_is_capped(service, monkeypatch, capsys):
    calls = []

    def drifting_step(points, centroids):
        calls.append(1)
        return [Centroid(c.x + 1, c.y) for c in centroids], [[] for _ in centroids]

    monkeypatch.setattr(clustering_module, "kmeans_step", drifting_step)
    service.initialize_clusters(2, "Random")

    steps = service.run_to_convergence()

    assert steps == 25
    assert len(calls) == 25
    assert service.state.iteration_count == 25
    assert service.state.converged is True
    assert "No convergence after 25 iterations" in capsys.readouterr().out


def test_run_to_convergence_respects_configured_cap(config, two_pairs, monkeypatch):
    class ShortConfig(config):
        MAX_ITERATIONS = 3

    monkeypatch.setattr(
        clustering_module, "kmeans_step",
        lambda points, centroids: ([Centroid(c.x, c.y + 1) for c in centroids], [[] for _ in centroids]),
    )
    service = ClusteringService(ShortConfig, points=two_pairs, rng=ScriptedRandom())
    service.initialize_clusters(2, "Random")

    assert service.run_to_convergence() == 3
    assert service.state.converged is True


def test_run_to_convergence_without_centroids(service):
    assert service.run_to_convergence() == 0
    assert service.state.converged is False


def test_grouping_refreshes_every_step(config):
    points = [Point(0, 0), Point(2, 0), Point(10, 0)]
    service = ClusteringService(config, points=points, rng=ScriptedRandom())
    service.initialize_clusters(2, "Random")

    service.step_once()
    service.step_once()

    assert service.state.clusters == [[Point(0, 0), Point(2, 0)], [Point(10, 0)]]


def test_grouping_frozen_after_first_step_when_configured(config):
    class FrozenConfig(config):
        REFRESH_CLUSTERS_EVERY_STEP = False

    points = [Point(0, 0), Point(2, 0), Point(10, 0)]
    service = ClusteringService(FrozenConfig, points=points, rng=ScriptedRandom())
    service.initialize_clusters(2, "Random")

    service.step_once()
    service.step_once()

    assert service.state.clusters == [[Point(0, 0)], [Point(2, 0), Point(10, 0)]]
    assert service.state.centroids == [Centroid(1, 0), Centroid(10, 0)]


def test_reset_keeps_dataset(service, two_pairs, config):
    service.initialize_clusters(2, "Random")
    service.run_to_convergence()

    service.reset()

    assert service.state.status is RunStatus.UNINITIALIZED
    assert service.state.clusters == []
    assert service.state.iteration_count == 0
    assert service.state.converged is False
    assert service.points == two_pairs
    assert service.n_clusters == config.DEFAULT_CLUSTERS


def test_new_dataset_resets_run(service):
    service.initialize_clusters(2, "Random")
    service.step_once()

    points = service.new_dataset(12)

    assert len(points) == 12
    assert service.points == points
    assert service.state.status is RunStatus.UNINITIALIZED
    assert service.state.iteration_count == 0


def test_set_points_resets_run(service):
    service.initialize_clusters(2, "Random")
    service.set_points([Point(1, 1)])
    assert service.state.centroids == []
    assert service.points == [Point(1, 1)]


def test_changing_selection_resets_run(service):
    service.initialize_clusters(2, "Random")

    assert service.select(2, "Random") is False
    assert service.state.status is RunStatus.RUNNING

    assert service.select(strategy="KMeans++") is True
    assert service.state.status is RunStatus.UNINITIALIZED


def test_invalid_cluster_count(service):
    with pytest.raises(ValueError):
        service.select("three")


def test_display_contract(service):
    display = service.get_display()
    assert display['centroids'] == []
    assert display['converged'] is False
    assert [s['label'] for s in display['series']] == ["Random Dataset"]
    assert display['bounds'] == {'x': [-10, 10], 'y': [-10, 10]}
    assert len(display['points']) == 4

    service.initialize_clusters(2, "Random")
    service.run_to_convergence()
    display = service.get_display()

    assert display['converged'] is True
    assert display['status'] == "converged"
    assert display['centroids'] == [{'x': 0.0, 'y': 0.5}, {'x': 10.0, 'y': 10.5}]
    assert [s['label'] for s in display['series']] == ["Converged Data", "Centroids"]


def test_assignments_follow_current_centroids(service):
    assert service.get_assignments() == []
    service.initialize_clusters(2, "Random")
    assert service.get_assignments() == [0, 0, 1, 1]


def test_stats(service):
    service.initialize_clusters(2, "Random")
    service.run_to_convergence()

    stats = service.get_stats()

    assert stats['status'] == "converged"
    assert stats['num_points'] == 4
    assert stats['num_clusters'] == 2
    assert stats['iteration_count'] == 2
    assert stats['cluster_sizes'] == [2, 2]
    assert stats['inertia'] == pytest.approx(1.0)
    assert stats['silhouette'] > 0.9


def test_placement_rejected_for_sampled_run(service, capsys):
    service.initialize_clusters(2, "Random")

    assert service.place_centroid(5, 5) is None
    assert service.state.k == 2
    assert service.state.centroids == [Centroid(0, 0), Centroid(10, 10)]
    assert "only with the Manual strategy" in capsys.readouterr().out


def test_placement_capped_at_selected_k(service, capsys):
    service.initialize_clusters(2, "Manual")
    service.place_centroid(1, 1)
    service.place_centroid(9, 9)

    assert service.place_centroid(5, 5) is None
    assert service.state.centroids == [Centroid(1, 1), Centroid(9, 9)]
    assert "All 2 centroids already placed" in capsys.readouterr().out


def test_no_clamp_warning_without_sampling(service, capsys):
    service.initialize_clusters(10, "Manual")
    service.initialize_clusters(10, "Spectral")
    assert "exceeds" not in capsys.readouterr().out
