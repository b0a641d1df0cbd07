"""
LayoutSimulation: one generated graph plus its running force layout.

The session owns everything that persists across ticks:
- the Graph (fixed edges, mutable positions)
- the current LayoutConfig (replaced as a whole on every edit)
- the ForceField and Integrator
- a single numpy Generator, seeded once, shared by generation and the
  barycenter rule

Each tick:
1. ForceField computes fresh velocities from positions + adjacency + config
2. Integrator applies them over dt, then anchoring, then the barycenter rule

Everything is single-threaded; the host loop calls tick() once per frame.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import time

import numpy as np

from springgraph.core.config import KEY_BINDINGS, LayoutConfig
from springgraph.core.graph import Graph
from springgraph.generators import GeneratorConfig, GeneratorKind, create_generator
from springgraph.physics.forces import ForceField
from springgraph.physics.integrator import Integrator, IntegratorConfig

logger = logging.getLogger(__name__)

# Warm-up ticks run before the first frame is shown
PHYSICS_ITERATIONS = 100


@dataclass
class LayoutSimulation:
    """A running force-directed layout of a fixed graph."""

    graph: Graph
    force_field: ForceField
    layout_config: LayoutConfig = field(default_factory=LayoutConfig)
    integrator_config: IntegratorConfig = field(default_factory=IntegratorConfig)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    current_tick: int = field(default=0, init=False)
    elapsed: float = field(default=0.0, init=False)
    integrator: Integrator = field(default=None, init=False)
    _last_wallclock: float | None = field(default=None, init=False)

    def __post_init__(self):
        # Fails here, before any tick, if anchoring does not fit the graph
        self.integrator = Integrator(self.integrator_config, self.graph)

    # ─── Ticking ───

    def tick(self, dt: float) -> None:
        """Run the force field then the integrator once."""
        self.force_field.apply(self.graph, self.layout_config)
        moved = self.integrator.step(dt, self.rng)

        self.current_tick += 1
        self.elapsed += dt
        logger.debug("tick %d: dt=%.4f barycenter=%s", self.current_tick, dt, moved)

    def tick_wallclock(self) -> float:
        """
        Tick using the wall-clock time since the previous call as dt.

        The first call uses dt = 0. Returns the dt that was applied.
        """
        now = time.perf_counter()
        dt = 0.0 if self._last_wallclock is None else now - self._last_wallclock
        self._last_wallclock = now
        self.tick(dt)
        return dt

    def relax(self, iterations: int = PHYSICS_ITERATIONS, dt: float = 0.1) -> None:
        """Run a fixed number of warm-up ticks."""
        for _ in range(iterations):
            self.tick(dt)

    def run(self, n_ticks: int, dt: float = 0.1) -> dict:
        """Run n_ticks fixed-step ticks and summarize the resulting layout."""
        for _ in range(n_ticks):
            self.tick(dt)
        return self.summary(n_ticks)

    def summary(self, n_ticks: int = 0) -> dict:
        positions = self.graph.positions
        speeds = np.linalg.norm(self.graph.velocities, axis=1)
        lengths = self.graph.edge_lengths()

        return {
            "n_ticks": n_ticks,
            "current_tick": self.current_tick,
            "elapsed": self.elapsed,
            "n_nodes": self.graph.n_nodes,
            "n_edges": self.graph.n_edges,
            "mean_speed": float(speeds.mean()),
            "max_speed": float(speeds.max()),
            "mean_edge_length": float(lengths.mean()) if len(lengths) else 0.0,
            "bounds": (
                float(positions[:, 0].min()),
                float(positions[:, 1].min()),
                float(positions[:, 0].max()),
                float(positions[:, 1].max()),
            ),
        }

    # ─── Live configuration ───

    def update_config(self, config: LayoutConfig) -> None:
        """Replace the whole layout configuration; takes effect next tick."""
        self.layout_config = config
        logger.info("Layout config updated: %s", config.as_dict())

    def adjust(self, name: str, increase: bool) -> LayoutConfig:
        """Scale one tunable field by the config's step factor."""
        config = self.layout_config.adjusted(name, increase)
        self.update_config(config)
        return config

    def handle_key(self, key: str) -> bool:
        """Apply the configuration edit bound to `key`. False if unbound."""
        binding = KEY_BINDINGS.get(key)
        if binding is None:
            return False
        self.adjust(*binding)
        return True

    # ─── Queries ───

    def positions(self) -> np.ndarray:
        """Copy of all node positions, [N, 2]."""
        return self.graph.positions.copy()

    def position(self, node: int) -> tuple[float, float]:
        return self.graph.position(node)


def create_simulation(
    kind: GeneratorKind = "delaunay",
    generator_config: GeneratorConfig | None = None,
    layout_config: LayoutConfig | None = None,
    integrator_config: IntegratorConfig | None = None,
    seed: int | None = None,
    positions: np.ndarray | None = None,
) -> LayoutSimulation:
    """
    Generate a graph and wrap it in a ready-to-tick simulation.

    Args:
        kind: Generator strategy ("bernoulli", "proximity", "delaunay")
        generator_config: Node count, window and edge parameters
        layout_config: Initial force parameters
        integrator_config: Anchoring and barycenter options
        seed: Fixed seed for reproducible runs; None draws fresh OS entropy
        positions: Optional explicit [N, 2] initial node positions

    Raises:
        ValueError: on any invalid parameter, before the first tick
    """
    generator_config = generator_config if generator_config is not None else GeneratorConfig()
    layout_config = layout_config if layout_config is not None else LayoutConfig()
    integrator_config = integrator_config if integrator_config is not None else IntegratorConfig()

    rng = np.random.default_rng(seed)
    generator = create_generator(kind, generator_config)
    graph = generator.generate(rng, positions=positions)

    force_field = ForceField(
        half_width=generator_config.half_width,
        half_height=generator_config.half_height,
    )
    simulation = LayoutSimulation(
        graph=graph,
        force_field=force_field,
        layout_config=layout_config,
        integrator_config=integrator_config,
        rng=rng,
    )

    logger.info(
        "Created %s simulation: %d nodes, %d edges, %d anchored",
        kind, graph.n_nodes, graph.n_edges, integrator_config.anchored_count,
    )
    return simulation
