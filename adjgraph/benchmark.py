import logging
import math
import time

from adjgraph.baseline_dijkstra import run_dijkstra
from adjgraph.exceptions import BenchmarkMismatch
from adjgraph.metrics import Metrics
from adjgraph.queries import generate_queries
from adjgraph.topology import (
    create_random_topology,
    load_graph_yaml,
    to_networkx,
)

logger = logging.getLogger(__name__)


def build_topology(config):
    """Load the configured topology file, or generate a random one."""
    if config.get("topology_path"):
        logger.info("Loading topology from %s", config["topology_path"])
        return load_graph_yaml(config["topology_path"])
    logger.info("Generating random topology (n=%s, m=%s, seed=%s)",
                config.get("nodes", 25), config.get("attach_edges", 2), config.get("seed", 42))
    return create_random_topology(
        n=config.get("nodes", 25),
        m=config.get("attach_edges", 2),
        seed=config.get("seed", 42),
        weight_range=config.get("weight_range"),
    )


def run_benchmark(config, graph=None):
    """
    Run a batch of shortest-path queries on the matrix graph and on the
    networkx baseline, recording per-query timings and results.

    Raises:
        BenchmarkMismatch: if the two implementations disagree on a cost
    """
    if graph is None:
        graph = build_topology(config)
    G = to_networkx(graph)

    queries = generate_queries(graph, num_queries=config.get("num_queries", 20),
                               seed=config.get("seed", 42))
    metrics = Metrics()

    for query in queries:
        src, dst = query["src"], query["dst"]

        start = time.perf_counter()
        path, cost = graph.shortest_path(src, dst)
        runtime_ms = (time.perf_counter() - start) * 1000.0

        start = time.perf_counter()
        _, baseline_cost = run_dijkstra(G, src, dst)
        baseline_ms = (time.perf_counter() - start) * 1000.0

        same = (math.isinf(cost) and math.isinf(baseline_cost)) or \
            math.isclose(cost, baseline_cost, rel_tol=1e-9)
        if not same:
            raise BenchmarkMismatch(
                f"query {query['id']} ({src} -> {dst}): cost {cost} != baseline {baseline_cost}"
            )

        found = path is not None
        hops = len(path) - 1 if found else 0
        metrics.log(runtime_ms, baseline_ms, cost if found else 0.0, hops, found)
        logger.debug("query %d: %d -> %d path=%s cost=%s", query["id"], src, dst, path, cost)

    logger.info("Benchmark complete: %d queries", len(queries))
    return metrics
