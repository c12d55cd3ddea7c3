"""
adjgraph: dense undirected weighted graphs with Dijkstra shortest paths.
"""

from adjgraph.exceptions import GraphError, InvalidEdge, NoSuchEdge
from adjgraph.graph import Edge, WeightedGraph

__all__ = ["Edge", "WeightedGraph", "GraphError", "InvalidEdge", "NoSuchEdge"]
