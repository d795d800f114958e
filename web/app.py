"""
Flask Web Application for the K-Means Clustering Visualizer.

Provides a REST API that a charting front end drives:
- Dataset generation
- Centroid initialization and manual placement
- Stepping and running to convergence
- Run state and statistics
"""
import os
import sys
import threading
from functools import wraps

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask, jsonify, request

from config import Config
from services.clustering import ClusteringService
from utils.initialization import InitStrategy

app = Flask(__name__)
app.config['SECRET_KEY'] = Config.SECRET_KEY

# Single run controller shared by all requests
clustering_service = ClusteringService(Config)

# Actions run one at a time; the development server is threaded
service_lock = threading.Lock()


def serialized(view):
    """Hold the service lock for the whole request."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        with service_lock:
            return view(*args, **kwargs)
    return wrapper


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _state_response():
    return jsonify(clustering_service.get_display())


# =============================================================================
# REST API - State
# =============================================================================

@app.route('/api/state')
@serialized
def api_state():
    """Get the dataset, centroids and run state for display."""
    try:
        return _state_response()
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@app.route('/api/stats')
@serialized
def api_stats():
    """Get run statistics."""
    try:
        return jsonify(clustering_service.get_stats())
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@app.route('/api/strategies')
@serialized
def api_strategies():
    """List initialization strategies and the current selection."""
    return jsonify({
        'strategies': [s.value for s in InitStrategy],
        'current': clustering_service.strategy,
        'n_clusters': clustering_service.n_clusters,
    })


# =============================================================================
# REST API - Run Actions
# =============================================================================

@app.route('/api/select', methods=['POST'])
@serialized
def api_select():
    """Update k and/or strategy. Accepts JSON body: { "k": int, "strategy": str }"""
    data = _json_body()
    try:
        clustering_service.select(data.get('k'), data.get('strategy'))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return _state_response()


@app.route('/api/initialize', methods=['POST'])
@serialized
def api_initialize():
    """Initialize centroids. Accepts optional JSON body: { "k": int, "strategy": str }"""
    data = _json_body()
    try:
        clustering_service.initialize_clusters(data.get('k'), data.get('strategy'))
        return _state_response()
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@app.route('/api/centroids', methods=['POST'])
@serialized
def api_place_centroid():
    """Place a centroid by hand. Expects JSON body: { "x": float, "y": float }"""
    data = _json_body()
    try:
        x = float(data['x'])
        y = float(data['y'])
    except (KeyError, TypeError, ValueError):
        return jsonify({'error': 'x and y coordinates are required'}), 400

    centroid = clustering_service.place_centroid(x, y)
    if centroid is None:
        return jsonify({'error': 'Run already started, reset to place centroids'}), 409
    return _state_response()


@app.route('/api/step', methods=['POST'])
@serialized
def api_step():
    """Perform a single K-Means iteration."""
    try:
        clustering_service.step_once()
        return _state_response()
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@app.route('/api/run', methods=['POST'])
@serialized
def api_run():
    """Run until convergence or the iteration cap."""
    try:
        steps = clustering_service.run_to_convergence()
        display = clustering_service.get_display()
        display['steps'] = steps
        return jsonify(display)
    except Exception as e:
        return jsonify({'error': str(e)}), 500


@app.route('/api/reset', methods=['POST'])
@serialized
def api_reset():
    """Reset the run, keeping the dataset."""
    clustering_service.reset()
    return _state_response()


@app.route('/api/dataset', methods=['POST'])
@serialized
def api_new_dataset():
    """Generate a new dataset. Accepts optional JSON body: { "n": int }"""
    data = _json_body()
    count = data.get('n')
    if count is not None:
        try:
            count = int(count)
        except (TypeError, ValueError):
            return jsonify({'error': f'Invalid number of points: {count!r}'}), 400
        if count < 0:
            return jsonify({'error': 'Number of points must be non-negative'}), 400

    try:
        clustering_service.new_dataset(count)
        return _state_response()
    except Exception as e:
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    app.run(host=Config.WEB_HOST, port=Config.WEB_PORT, debug=True)
