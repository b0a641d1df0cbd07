"""Unit tests for the graph generators."""

import logging
from collections import deque

import numpy as np
import pytest
from scipy.spatial import Delaunay
from scipy.spatial.distance import pdist, squareform

from springgraph.generators import (
    BernoulliGenerator,
    DelaunayGenerator,
    GeneratorConfig,
    ProximityGenerator,
    chain_edges,
    create_generator,
    triangulation_edges,
    uniform_positions,
)


def _is_connected(graph) -> bool:
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for other in graph.neighbors(node):
            if other not in seen:
                seen.add(other)
                queue.append(other)
    return len(seen) == graph.n_nodes


class TestGeneratorConfig:
    """Tests for GeneratorConfig validation."""

    def test_default_config(self):
        cfg = GeneratorConfig()
        assert cfg.n_nodes == 10
        assert cfg.p_edge == 0.5

    @pytest.mark.parametrize("kwargs", [
        {"n_nodes": 0},
        {"p_edge": -0.1},
        {"p_edge": 1.5},
        {"half_width": 0.0},
        {"half_height": -5.0},
        {"proximity_factor": 0.0},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            GeneratorConfig(**kwargs)

    def test_probability_bounds_accepted(self):
        assert GeneratorConfig(p_edge=0.0).p_edge == 0.0
        assert GeneratorConfig(p_edge=1.0).p_edge == 1.0


class TestPlacement:
    """Tests for uniform node placement."""

    def test_positions_inside_window(self, rng):
        positions = uniform_positions(rng, 500, half_width=30.0, half_height=10.0)

        assert positions.shape == (500, 2)
        assert np.all(np.abs(positions[:, 0]) <= 30.0)
        assert np.all(np.abs(positions[:, 1]) <= 10.0)

    def test_generate_uses_config_count(self, rng, small_generator_config):
        graph = BernoulliGenerator(small_generator_config).generate(rng)
        assert graph.n_nodes == 20

    def test_explicit_positions(self, rng, square_positions):
        graph = BernoulliGenerator(GeneratorConfig()).generate(rng, positions=square_positions)

        assert graph.n_nodes == 4
        assert np.array_equal(graph.positions, square_positions)

    def test_explicit_positions_bad_shape(self, rng):
        with pytest.raises(ValueError):
            BernoulliGenerator(GeneratorConfig()).generate(rng, positions=np.zeros((3, 3)))
        with pytest.raises(ValueError):
            BernoulliGenerator(GeneratorConfig()).generate(rng, positions=np.zeros((0, 2)))

    def test_same_seed_same_graph(self, small_generator_config):
        gen = DelaunayGenerator(small_generator_config)
        a = gen.generate(np.random.default_rng(3))
        b = gen.generate(np.random.default_rng(3))

        assert np.array_equal(a.positions, b.positions)
        assert a.edges == b.edges


class TestFactory:
    """Tests for create_generator."""

    @pytest.mark.parametrize("kind, cls", [
        ("bernoulli", BernoulliGenerator),
        ("proximity", ProximityGenerator),
        ("delaunay", DelaunayGenerator),
    ])
    def test_kinds(self, kind, cls):
        assert isinstance(create_generator(kind), cls)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            create_generator("grid")


class TestBernoulliGenerator:
    """Tests for BernoulliGenerator."""

    def test_p_one_gives_complete_graph(self, rng, square_positions):
        graph = BernoulliGenerator(GeneratorConfig(p_edge=1.0)).generate(
            rng, positions=square_positions
        )
        assert graph.n_edges == 6
        assert graph.edges == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]

    def test_p_zero_gives_no_edges(self, rng, small_generator_config):
        small_generator_config.p_edge = 0.0
        graph = BernoulliGenerator(small_generator_config).generate(rng)
        assert graph.n_edges == 0

    def test_edges_are_valid_pairs(self, rng, small_generator_config):
        graph = BernoulliGenerator(small_generator_config).generate(rng)
        n = graph.n_nodes

        assert graph.n_edges <= n * (n - 1) // 2
        for a, b in graph.edges:
            assert 0 <= a < b < n
        assert len(set(graph.edges)) == graph.n_edges

    def test_edge_rate_matches_probability(self, rng):
        cfg = GeneratorConfig(n_nodes=60, p_edge=0.3)
        graph = BernoulliGenerator(cfg).generate(rng)

        n_pairs = 60 * 59 // 2
        expected = 0.3 * n_pairs
        std = np.sqrt(n_pairs * 0.3 * 0.7)
        assert abs(graph.n_edges - expected) < 5 * std

    def test_single_node(self, rng):
        graph = BernoulliGenerator(GeneratorConfig(n_nodes=1, p_edge=1.0)).generate(rng)
        assert graph.n_edges == 0


class TestProximityGenerator:
    """Tests for ProximityGenerator."""

    def test_only_closest_pair(self, rng):
        positions = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 10.0], [20.0, 20.0]])
        graph = ProximityGenerator(GeneratorConfig(proximity_factor=1.5)).generate(
            rng, positions=positions
        )
        assert graph.edges == [(0, 1)]

    def test_ties_at_minimum_all_included(self, rng):
        positions = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]])
        graph = ProximityGenerator(GeneratorConfig(proximity_factor=1.5)).generate(
            rng, positions=positions
        )
        # (0, 2) is at distance 2 >= 1.5 and is excluded
        assert graph.edges == [(0, 1), (1, 2)]

    def test_bound_is_strict(self, rng):
        positions = np.array([[0.0, 0.0], [1.0, 0.0], [3.0, 0.0]])
        graph = ProximityGenerator(GeneratorConfig(proximity_factor=2.0)).generate(
            rng, positions=positions
        )
        # (1, 2) sits exactly at 2 * d_min
        assert graph.edges == [(0, 1)]

    def test_threshold_property(self, rng, small_generator_config):
        gen = ProximityGenerator(small_generator_config)
        graph = gen.generate(rng)

        dist = squareform(pdist(graph.positions))
        bound = small_generator_config.proximity_factor * pdist(graph.positions).min()
        for i, j in graph.iter_pairs():
            assert graph.has_edge(i, j) == (dist[i, j] < bound)

    def test_minimum_pair_always_included(self, rng, small_generator_config):
        graph = ProximityGenerator(small_generator_config).generate(rng)

        dist = squareform(pdist(graph.positions))
        np.fill_diagonal(dist, np.inf)
        i, j = np.unravel_index(np.argmin(dist), dist.shape)
        assert graph.has_edge(int(i), int(j))

    def test_fewer_than_two_nodes(self, rng):
        graph = ProximityGenerator(GeneratorConfig(n_nodes=1)).generate(rng)
        assert graph.n_edges == 0

    def test_coincident_nodes_give_no_edges(self, rng):
        positions = np.array([[1.0, 1.0], [1.0, 1.0], [5.0, 5.0]])
        graph = ProximityGenerator(GeneratorConfig(proximity_factor=3.0)).generate(
            rng, positions=positions
        )
        assert graph.n_edges == 0


class TestTriangulationEdges:
    """Tests for triangulation edge extraction."""

    def test_triangle_with_interior_point(self):
        points = np.array([[0.0, 0.0], [10.0, 0.0], [5.0, 10.0], [5.0, 3.0]])
        edges = triangulation_edges(points)

        pairs = {tuple(e) for e in edges.tolist()}
        assert pairs == {(0, 1), (0, 2), (1, 2), (0, 3), (1, 3), (2, 3)}

    def test_matches_scipy(self, rng):
        points = uniform_positions(rng, 30, 50.0, 50.0)
        edges = triangulation_edges(points)

        expected = set()
        for simplex in Delaunay(points).simplices:
            for a, b in ((0, 1), (1, 2), (0, 2)):
                u, v = sorted((int(simplex[a]), int(simplex[b])))
                expected.add((u, v))

        assert {tuple(e) for e in edges.tolist()} == expected
        assert len(edges) == len(expected)

    def test_degenerate_returns_none(self, collinear_positions):
        assert triangulation_edges(collinear_positions) is None
        assert triangulation_edges(np.array([[0.0, 0.0], [1.0, 1.0]])) is None
        assert triangulation_edges(np.array([[2.0, 2.0]] * 4)) is None


class TestChainEdges:
    """Tests for the degenerate-input fallback chain."""

    def test_collinear_order(self, collinear_positions):
        edges = chain_edges(collinear_positions)
        pairs = sorted(tuple(e) for e in edges.tolist())
        assert pairs == [(0, 3), (0, 4), (1, 3), (2, 4)]

    def test_two_points(self):
        edges = chain_edges(np.array([[0.0, 0.0], [3.0, 4.0]]))
        assert edges.tolist() == [[0, 1]]

    def test_one_point(self):
        assert chain_edges(np.array([[0.0, 0.0]])).shape == (0, 2)


class TestDelaunayGenerator:
    """Tests for DelaunayGenerator."""

    def test_p_one_gives_full_triangulation(self, rng, small_generator_config):
        small_generator_config.p_edge = 1.0
        graph = DelaunayGenerator(small_generator_config).generate(rng)

        expected = {tuple(e) for e in triangulation_edges(graph.positions).tolist()}
        assert set(graph.edges) == expected
        assert graph.n_edges == len(expected)

    def test_edges_subset_of_triangulation(self, rng, small_generator_config):
        graph = DelaunayGenerator(small_generator_config).generate(rng)

        expected = {tuple(e) for e in triangulation_edges(graph.positions).tolist()}
        assert set(graph.edges) <= expected

    def test_edge_count_is_linear(self, rng):
        cfg = GeneratorConfig(n_nodes=50, p_edge=1.0)
        graph = DelaunayGenerator(cfg).generate(rng)
        assert graph.n_edges <= 3 * 50 - 6

    def test_collinear_gives_connected_chain(self, rng, collinear_positions, caplog):
        with caplog.at_level(logging.WARNING, logger="springgraph"):
            graph = DelaunayGenerator(GeneratorConfig(p_edge=1.0)).generate(
                rng, positions=collinear_positions
            )

        assert graph.n_edges == 4
        assert _is_connected(graph)
        assert "degenerate" in caplog.text

    @pytest.mark.parametrize("positions", [
        np.array([[0.0, 0.0]]),
        np.array([[0.0, 0.0], [5.0, 5.0]]),
        np.array([[1.0, 1.0], [1.0, 1.0], [1.0, 1.0]]),
    ])
    def test_degenerate_inputs_do_not_raise(self, rng, positions):
        graph = DelaunayGenerator(GeneratorConfig(p_edge=1.0)).generate(
            rng, positions=positions
        )
        assert graph.n_edges <= max(len(positions) - 1, 0)

    def test_p_zero_gives_no_edges(self, rng, small_generator_config):
        small_generator_config.p_edge = 0.0
        graph = DelaunayGenerator(small_generator_config).generate(rng)
        assert graph.n_edges == 0
