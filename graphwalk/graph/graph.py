"""
Undirected graph over caller-owned nodes.

Supports vertex/edge mutation and three traversals:
- Depth-first search (LIFO stack frontier)
- Breadth-first search (FIFO queue frontier)
- Unweighted shortest path (breadth-first search over paths)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from graphwalk.graph.node import Node
from graphwalk.structures.queue import Queue

logger = logging.getLogger(__name__)


class InvalidEdgeEndpoint(ValueError):
    """
    Raised when an edge is requested between nodes the graph does not own.

    Attributes:
        endpoints: The node(s) that are not members of the graph
    """

    def __init__(self, endpoints: list[Node]) -> None:
        self.endpoints = endpoints
        values = ", ".join(repr(node.value) for node in endpoints)
        super().__init__(f"Edge endpoint(s) not in graph: {values}")


class Graph:
    """
    Undirected graph holding shared references to Node objects.

    Membership is by node identity. Every adjacency relation among member
    nodes is mutual; mutations keep it that way.

    Example:
        >>> a, b = Node("A"), Node("B")
        >>> graph = Graph()
        >>> graph.add_vertices([a, b])
        >>> graph.add_edge(a, b)
        >>> graph.breadth_first_search(a)
        ['A', 'B']
    """

    def __init__(self) -> None:
        # Insertion-ordered identity set (values unused)
        self.nodes: dict[Node, None] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: Node) -> None:
        """Add a node to the graph. Adding a member again is a no-op."""
        if vertex not in self.nodes:
            self.nodes[vertex] = None
            logger.debug(f"Added vertex {vertex.value!r}")

    def add_vertices(self, vertices: Iterable[Node]) -> None:
        """Add each node in order."""
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, v1: Node, v2: Node) -> None:
        """
        Connect two member nodes.

        Args:
            v1: First endpoint, must already be in the graph
            v2: Second endpoint, must already be in the graph

        Raises:
            InvalidEdgeEndpoint: If either endpoint is not in the graph
        """
        missing = [v for v in (v1, v2) if v not in self.nodes]
        if missing:
            raise InvalidEdgeEndpoint(missing)

        v1.adjacent[v2] = None
        v2.adjacent[v1] = None
        logger.debug(f"Added edge {v1.value!r} -- {v2.value!r}")

    def remove_edge(self, v1: Node, v2: Node) -> None:
        """Disconnect two nodes. Does nothing if they are not connected."""
        v1.adjacent.pop(v2, None)
        v2.adjacent.pop(v1, None)

    def remove_vertex(self, vertex: Node) -> None:
        """
        Remove a node and every edge touching it.

        Former neighbours lose their reference to the node, and the node's
        own adjacency ends up empty. Non-members are ignored.
        """
        if vertex not in self.nodes:
            return

        # Snapshot: remove_edge mutates vertex.adjacent
        for neighbor in list(vertex.adjacent):
            self.remove_edge(vertex, neighbor)
        del self.nodes[vertex]
        logger.debug(f"Removed vertex {vertex.value!r}")

    # =========================================================================
    # Queries
    # =========================================================================

    def has_edge(self, v1: Node, v2: Node) -> bool:
        """Whether v1 and v2 are adjacent."""
        return v2 in v1.adjacent

    @property
    def edge_count(self) -> int:
        """Number of undirected edges between member nodes."""
        # A self-loop is a single adjacency entry but both ends of its edge
        ends = sum(
            2 if neighbor is node else 1
            for node in self.nodes
            for neighbor in node.adjacent
            if neighbor in self.nodes
        )
        return ends // 2

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={self.edge_count})"

    # =========================================================================
    # Traversal
    # =========================================================================

    def _traverse(
        self,
        start: Node,
        put: Callable[[Node], None],
        take: Callable[[], Node],
        exhausted: Callable[[], bool],
    ) -> list[Any] | None:
        """
        Visit every node reachable from start.

        The frontier is supplied as three callables so the same loop serves
        both a stack (depth-first) and a queue (breadth-first).

        Returns:
            Values in visit order, or None if start is not in the graph
        """
        if start not in self.nodes:
            logger.debug(f"Traversal start {start.value!r} not in graph")
            return None

        put(start)
        seen = {start}
        visited_values = []

        while not exhausted():
            current = take()
            visited_values.append(current.value)

            for neighbor in current.adjacent:
                if neighbor not in seen:
                    seen.add(neighbor)
                    put(neighbor)

        logger.debug(
            f"Traversal from {start.value!r} visited {len(visited_values)} nodes"
        )
        return visited_values

    def depth_first_search(self, start: Node) -> list[Any] | None:
        """
        Depth-first traversal from start.

        Returns:
            Node values in visit order, or None if start is not in the graph
        """
        stack: list[Node] = []
        return self._traverse(start, stack.append, stack.pop, lambda: not stack)

    def breadth_first_search(self, start: Node) -> list[Any] | None:
        """
        Breadth-first traversal from start.

        Values come out in non-decreasing edge distance from start.

        Returns:
            Node values in visit order, or None if start is not in the graph
        """
        queue: Queue[Node] = Queue()
        return self._traverse(start, queue.enqueue, queue.dequeue, queue.is_empty)

    def shortest_path(
        self,
        source: Node,
        target: Node,
        max_depth: int | None = None,
    ) -> list[Any] | None:
        """
        Find a path with the fewest edges from source to target.

        Runs breadth-first search over partial paths. Paths leave the queue
        in order of length, so the first one ending at target is shortest.
        Ties are broken by adjacency insertion order.

        Args:
            source: Start node
            target: End node
            max_depth: Maximum number of edges in the path (None = unlimited)

        Returns:
            Values along the path from source to target, or None if either
            node is not in the graph or target is unreachable

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")

        if source not in self.nodes:
            logger.debug(f"Source {source.value!r} not in graph")
            return None
        if target not in self.nodes:
            logger.debug(f"Target {target.value!r} not in graph")
            return None

        if source is target:
            return [source.value]

        queue: Queue[list[Node]] = Queue()
        queue.enqueue([source])
        visited = {source}

        while not queue.is_empty():
            path = queue.dequeue()
            last = path[-1]

            if last is target:
                logger.debug(
                    f"Shortest path {source.value!r} -> {target.value!r}: "
                    f"{len(path) - 1} edges"
                )
                return [node.value for node in path]

            if max_depth is not None and len(path) - 1 >= max_depth:
                continue

            for neighbor in last.adjacent:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.enqueue(path + [neighbor])

        logger.debug(f"No path from {source.value!r} to {target.value!r}")
        return None
