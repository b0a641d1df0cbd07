"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def square_positions():
    """Four nodes on the corners of a 10x10 square."""
    return np.array([
        [0.0, 0.0],
        [10.0, 0.0],
        [0.0, 10.0],
        [10.0, 10.0],
    ])


@pytest.fixture
def collinear_positions():
    """Five nodes on a diagonal line, deliberately out of order."""
    return np.array([
        [2.0, 2.0],
        [0.0, 0.0],
        [4.0, 4.0],
        [1.0, 1.0],
        [3.0, 3.0],
    ])


@pytest.fixture
def small_generator_config():
    """Configuration for a 20-node graph in a 100x100 window."""
    from springgraph.generators import GeneratorConfig
    return GeneratorConfig(
        n_nodes=20,
        half_width=50.0,
        half_height=50.0,
        p_edge=0.5,
        proximity_factor=2.0,
    )
