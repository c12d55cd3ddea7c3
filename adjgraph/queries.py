import random


def generate_queries(graph, num_queries=5, seed=42):
    """
    Generate reproducible (source, target) shortest-path queries.

    Args:
        graph: WeightedGraph with at least two vertices
        num_queries: Number of queries to generate
        seed: Random seed for reproducibility

    Returns:
        List of query dictionaries with keys id, src, dst
    """
    if graph.vertex_count < 2:
        raise ValueError("need at least two vertices to generate queries")

    rng = random.Random(seed)
    nodes = list(range(graph.vertex_count))
    queries = []
    for i in range(num_queries):
        src, dst = rng.sample(nodes, 2)
        queries.append({
            "id": i,
            "src": src,
            "dst": dst,
        })
    return queries
