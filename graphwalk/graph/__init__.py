"""
Graph module.

Provides the undirected graph data structure:
- Node: Vertex carrying a value and its neighbours
- Graph: Vertex/edge mutation, DFS, BFS and shortest path
- InvalidEdgeEndpoint: Raised when an edge endpoint is not in the graph
"""

from graphwalk.graph.graph import Graph, InvalidEdgeEndpoint
from graphwalk.graph.node import Node

__all__ = [
    "Graph",
    "InvalidEdgeEndpoint",
    "Node",
]
