import logging
import sys

from adjgraph.benchmark import run_benchmark
from adjgraph.config import load_config
from adjgraph.exceptions import NoSuchEdge
from adjgraph.graph import Edge, WeightedGraph


def run_demo():
    edges = [
        Edge(0, 1, 5),
        Edge(4, 8, 9),
        Edge(2, 1, 3),
        Edge(10, 5, 2),
        Edge(6, 9, 1),
    ]
    G = WeightedGraph.from_edges(edges)
    print(f"Built {G!r}")
    print(f"Weight 5-10: {G.at(5, 10)}")
    try:
        G.at(5, 4)
    except NoSuchEdge as e:
        print(f"Lookup 5-4 failed as expected: {e}")

    path, cost = G.shortest_path(0, 2)
    print(f"Shortest path 0 -> 2: {path} (total cost = {cost})")
    print(f"Path 0 -> 10: {G.path(0, 10)}")


if __name__ == "__main__":
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config/example_config.yaml"
    config = load_config(config_path)
    logging.basicConfig(
        level=config.get("log_level", "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    run_demo()

    print("\n=== Benchmark ===")
    metrics = run_benchmark(config)
    print(metrics.summary())

    if config.get("plot"):
        from adjgraph.visualize import plot_metrics
        plot_metrics(metrics)
