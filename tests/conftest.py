"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections import deque

import pytest

from graphwalk.graph import Graph, Node


@pytest.fixture
def nodes() -> dict[str, Node]:
    """Return fresh nodes A-E keyed by their value."""
    return {value: Node(value) for value in "ABCDE"}


@pytest.fixture
def path_graph(nodes: dict[str, Node]) -> Graph:
    """Return the path graph A-B-C-D (E is created but not added)."""
    graph = Graph()
    graph.add_vertices([nodes[v] for v in "ABCD"])
    graph.add_edge(nodes["A"], nodes["B"])
    graph.add_edge(nodes["B"], nodes["C"])
    graph.add_edge(nodes["C"], nodes["D"])
    return graph


@pytest.fixture
def branching_graph() -> tuple[Graph, dict[str, Node]]:
    """
    Return a small graph with a cycle, a branch and a separate component.

        A - B - D - F
        |   |
        C - E       G - H
    """
    nodes = {value: Node(value) for value in "ABCDEFGH"}
    graph = Graph()
    graph.add_vertices(nodes.values())
    for v1, v2 in [
        ("A", "B"),
        ("A", "C"),
        ("B", "D"),
        ("B", "E"),
        ("C", "E"),
        ("D", "F"),
        ("G", "H"),
    ]:
        graph.add_edge(nodes[v1], nodes[v2])
    return graph, nodes


def _edge_distances(start: Node) -> dict[object, int]:
    """Reference BFS distances from start, keyed by node value."""
    distances = {start: 0}
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for neighbor in node.adjacent:
            if neighbor not in distances:
                distances[neighbor] = distances[node] + 1
                pending.append(neighbor)
    return {node.value: distance for node, distance in distances.items()}


@pytest.fixture
def edge_distances():
    """Return a helper computing reference edge distances from a node."""
    return _edge_distances
