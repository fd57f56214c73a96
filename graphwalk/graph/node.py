"""
Vertex record for undirected graphs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """
    A vertex carrying an opaque value and its neighbours.

    Nodes compare and hash by identity, so two nodes holding equal values
    are still distinct vertices. A node can exist outside any graph.

    Attributes:
        value: Caller-supplied payload, never inspected by the graph
        adjacent: Neighbouring nodes as an insertion-ordered set
            (dict keys, values unused). Iteration follows the order
            edges were added.
    """

    value: Any
    adjacent: dict[Node, None] = field(default_factory=dict)

    @property
    def degree(self) -> int:
        """Number of neighbours."""
        return len(self.adjacent)

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, degree={self.degree})"
