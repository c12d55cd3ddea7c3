"""
Topology helpers for adjgraph
- Creates a Barabasi-Albert (scale-free) topology with random positive weights
- Converts between WeightedGraph and networkx.Graph
- Saves/loads a compact YAML description of a graph
Usage:
    from adjgraph.topology import create_random_topology, save_graph_yaml
    G = create_random_topology(n=25, m=2, seed=42)
    save_graph_yaml(G, "config/topology.yaml")
"""

import logging
import random

import networkx as nx
import yaml

from adjgraph.exceptions import ConfigError, InvalidEdge
from adjgraph.graph import WeightedGraph

logger = logging.getLogger(__name__)

# --- Default constants (tweakable) ---
DEFAULT_WEIGHT_RANGE = (1.0, 10.0)


def create_random_topology(n=25, m=2, seed=42, weight_range=None):
    """
    Create a Barabasi-Albert (scale-free) graph with uniform random weights.
    Parameters:
      - n: number of nodes
      - m: BA parameter (edges to attach from new node to existing nodes)
      - seed: RNG seed for reproducibility
      - weight_range: (min, max) edge weight; min must be > 0
    Returns:
      - WeightedGraph with n vertices
    """
    if weight_range is None:
        weight_range = DEFAULT_WEIGHT_RANGE
    low, high = weight_range
    if low <= 0 or high < low:
        raise ValueError(f"weight_range must satisfy 0 < min <= max, got {weight_range!r}")

    rng = random.Random(seed)
    nx_graph = nx.barabasi_albert_graph(n, m, seed=seed)
    for u, v in nx_graph.edges():
        nx_graph[u][v]['weight'] = rng.uniform(low, high)

    graph = from_networkx(nx_graph)
    logger.debug("created random topology: %s", graph)
    return graph


# ----------------------
# networkx conversion
# ----------------------

def to_networkx(graph):
    """Copy a WeightedGraph into an undirected networkx.Graph (attribute 'weight')."""
    G = nx.Graph()
    G.add_nodes_from(range(graph.vertex_count))
    for u, v, w in graph.edges():
        G.add_edge(u, v, weight=w)
    return G


def from_networkx(G, weight='weight'):
    """
    Build a WeightedGraph from a networkx graph whose nodes are 0..n-1.
    Edges without the weight attribute get 1.0.
    """
    nodes = sorted(G.nodes())
    if nodes != list(range(len(nodes))):
        raise ValueError("networkx graph nodes must be the integers 0..n-1")
    graph = WeightedGraph(len(nodes))
    graph.add_edges((u, v, d.get(weight, 1.0)) for u, v, d in G.edges(data=True))
    return graph


# ----------------------
# YAML I/O
# ----------------------

def save_graph_yaml(graph, path="config/topology.yaml"):
    """
    Save a compact YAML with the vertex count and the edge list.
    This is human-readable and useful for inspection / reproducibility.
    """
    out = {
        'vertex_count': graph.vertex_count,
        'edges': [{'u': u, 'v': v, 'weight': w} for u, v, w in graph.edges()],
    }
    with open(path, 'w') as f:
        yaml.safe_dump(out, f)
    return path


def load_graph_yaml(path="config/topology.yaml"):
    """
    Load the YAML created by save_graph_yaml back into a WeightedGraph.
    Edges go through add_edges, so a bad file raises InvalidEdge; a file
    whose top level is not a mapping raises ConfigError.
    If vertex_count is missing it is inferred from the edges.
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level, got {type(data).__name__}")
    edges = []
    for e in data.get('edges') or []:
        if not isinstance(e, dict):
            raise InvalidEdge(e, "expected a mapping with u, v and weight")
        edges.append((e.get('u'), e.get('v'), e.get('weight')))
    if 'vertex_count' not in data:
        return WeightedGraph.from_edges(edges)
    graph = WeightedGraph(data['vertex_count'])
    graph.add_edges(edges)
    return graph


# ----------------------
# Small summary helper
# ----------------------
def topology_summary(graph):
    n = graph.vertex_count
    weights = [w for _, _, w in graph.edges()]
    m = len(weights)
    avg_deg = 2.0 * m / n if n else 0.0
    avg_weight = sum(weights) / m if m else 0.0
    return {
        'nodes': n,
        'edges': m,
        'avg_degree': avg_deg,
        'avg_weight': avg_weight
    }


# If this module is run directly, generate a tiny sample and print summary
if __name__ == "__main__":
    G = create_random_topology(n=25, m=2, seed=42)
    print("Topology created. Summary:")
    print(topology_summary(G))
    save_path = save_graph_yaml(G, "config/topology_sample.yaml")
    print("Saved topology to:", save_path)
    print("Sample edge:", next(G.edges()))
