import networkx as nx


def build_sample_graph():
    """
    Creates the small undirected weighted graph used in the walkthrough:
    the direct 0-2 edge is more expensive than going through vertex 1.
    """
    G = nx.Graph()
    G.add_nodes_from(range(4))

    # (node1, node2, weight)
    edges = [
        (0, 1, 2.0),
        (1, 2, 2.0),
        (0, 2, 10.0),
    ]

    for u, v, w in edges:
        G.add_edge(u, v, weight=w)

    return G


def run_dijkstra(G, source, target):
    """
    Runs networkx's Dijkstra between two nodes.
    Returns (path, cost), or (None, inf) when target can't be reached.
    """
    try:
        path = nx.dijkstra_path(G, source, target, weight='weight')
        cost = nx.dijkstra_path_length(G, source, target, weight='weight')
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return None, float('inf')
    return path, cost


if __name__ == "__main__":
    print("Running networkx Dijkstra baseline...")
    G = build_sample_graph()
    path, cost = run_dijkstra(G, 0, 2)
    print(f"Shortest path from 0 to 2: {path} (total cost = {cost})")
