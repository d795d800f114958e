"""
Configuration settings for the K-Means clustering visualizer.

This module centralizes all configuration parameters for dataset generation,
centroid initialization, the run loop and the web API.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Central configuration for the clustering engine."""

    # =========================================================================
    # Dataset
    # =========================================================================
    NUM_POINTS: int = int(os.getenv("NUM_POINTS", "100"))

    # Fixed display plane; generated coordinates are integers in this range
    COORD_MIN: int = -10
    COORD_MAX: int = 10

    # =========================================================================
    # Initialization
    # =========================================================================
    DEFAULT_CLUSTERS: int = int(os.getenv("DEFAULT_CLUSTERS", "3"))
    # "Random", "Farthest-First", "KMeans++" or "Manual"
    DEFAULT_STRATEGY: str = os.getenv("DEFAULT_STRATEGY", "Random")

    # Unset means a fresh seed for every process
    RANDOM_SEED: int | None = int(os.environ["RANDOM_SEED"]) if os.getenv("RANDOM_SEED") else None

    # =========================================================================
    # Run Loop
    # =========================================================================
    MAX_ITERATIONS: int = int(os.getenv("MAX_ITERATIONS", "25"))

    # False keeps the grouping from the first step on display
    REFRESH_CLUSTERS_EVERY_STEP: bool = _env_flag("REFRESH_CLUSTERS_EVERY_STEP", "true")

    # =========================================================================
    # Web API
    # =========================================================================
    WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "5000"))
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
