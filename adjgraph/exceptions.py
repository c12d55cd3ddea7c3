"""
Custom exceptions for adjgraph
"""


class GraphError(Exception):
    """Base exception for invalid graph operations"""
    pass


class InvalidEdge(GraphError, ValueError):
    """Edge rejected on insertion (self-loop, bad weight or bad endpoint)"""

    def __init__(self, edge, reason):
        self.edge = edge
        self.reason = reason
        super().__init__(f"invalid edge {edge!r}: {reason}")


class NoSuchEdge(GraphError, LookupError):
    """Checked lookup on a vertex pair that shares no edge"""

    def __init__(self, u, v):
        self.u = u
        self.v = v
        super().__init__(f"no edge between {u!r} and {v!r}")


class ConfigError(GraphError):
    """Configuration file could not be used"""
    pass


class BenchmarkMismatch(GraphError):
    """Matrix Dijkstra and the networkx baseline disagree on a path cost"""
    pass
