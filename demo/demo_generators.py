#!/usr/bin/env python3
"""
Demo: Generator Comparison

Builds one graph per strategy from the same node positions:
1. Bernoulli: every pair with probability p_edge
2. Proximity: pairs closer than proximity_factor * d_min
3. Delaunay: triangulation edges with probability p_edge

Then relaxes each layout for a fixed number of ticks and saves
before/after figures side by side.
"""

from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from springgraph.generators import GeneratorConfig, uniform_positions
from springgraph.logging_config import setup_logging
from springgraph.core import LayoutConfig
from springgraph.simulation import PHYSICS_ITERATIONS, create_simulation
from springgraph.viz import plot_generators, save_figure


def main():
    setup_logging()

    print("=" * 60)
    print("  GRAPH GENERATOR COMPARISON")
    print("=" * 60)

    seed = 7
    half_extent = 60.0
    generator_config = GeneratorConfig(
        n_nodes=25,
        half_width=half_extent,
        half_height=half_extent,
        p_edge=0.5,
        proximity_factor=3.0,
    )
    layout_config = LayoutConfig(
        spring_length=15.0,
        spring_force=0.5,
        spring_scale=1.0,
        electric_force=200.0,
        wall_repulsion=50.0,
    )

    # Same starting positions for every strategy
    positions = uniform_positions(
        np.random.default_rng(seed), generator_config.n_nodes, half_extent, half_extent
    )

    print(f"\n1. Setup:")
    print(f"   Nodes: {generator_config.n_nodes}")
    print(f"   Window: [-{half_extent}, {half_extent}]^2")
    print(f"   p_edge={generator_config.p_edge}, proximity_factor={generator_config.proximity_factor}")

    kinds = ["bernoulli", "proximity", "delaunay"]
    simulations = {
        kind: create_simulation(
            kind,
            generator_config,
            layout_config,
            seed=seed,
            positions=positions,
        )
        for kind in kinds
    }

    print("\n2. Generated graphs:")
    for kind, sim in simulations.items():
        print(f"   {kind:<10} {sim.graph.n_edges:4d} edges")

    window = (half_extent, half_extent)
    before = plot_generators(
        [sim.graph for sim in simulations.values()], kinds, window=window
    )
    before.suptitle("Initial placement", fontweight="bold")

    print(f"\n3. Relaxing for {PHYSICS_ITERATIONS} ticks...")
    for kind, sim in simulations.items():
        stats = sim.run(PHYSICS_ITERATIONS, dt=0.05)
        print(
            f"   {kind:<10} mean edge length {stats['mean_edge_length']:7.2f}, "
            f"mean speed {stats['mean_speed']:8.3f}"
        )

    after = plot_generators(
        [sim.graph for sim in simulations.values()], kinds, window=window
    )
    after.suptitle(f"After {PHYSICS_ITERATIONS} ticks", fontweight="bold")

    output_dir = Path("output/demo_generators")
    output_dir.mkdir(parents=True, exist_ok=True)
    save_figure(before, output_dir / "initial.png")
    save_figure(after, output_dir / "relaxed.png")
    plt.close("all")
    print(f"\n4. Saved figures to {output_dir}")


if __name__ == "__main__":
    main()
