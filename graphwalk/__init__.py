"""
graphwalk: in-memory undirected graphs.

Vertex and edge mutation plus depth-first, breadth-first and
unweighted shortest-path traversal over caller-owned nodes.
"""

__version__ = "0.1.0"
