"""A small directed graph and simple graph measures."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Generic, TypeVar

NodeT = TypeVar("NodeT")


class Graph(Generic[NodeT]):
    """Nodes in insertion order plus adjacency lists keyed by node index."""

    def __init__(self) -> None:
        self.nodes: list[NodeT] = []
        self.adjacency: dict[int, list[int]] = {}

    def add_node(self, node: NodeT) -> None:
        """Append a node."""
        self.nodes.append(node)

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from *source* to *target*."""
        self.adjacency.setdefault(source, []).append(target)

    def neighbors(self, node_id: int) -> list[int]:
        """Targets of the edges leaving *node_id*, in insertion order."""
        return list(self.adjacency.get(node_id, ()))

    def clear(self) -> None:
        """Remove all nodes and edges."""
        self.nodes.clear()
        self.adjacency.clear()

    def __len__(self) -> int:
        return len(self.nodes)


def size_similarity(structure1: Sequence[int], structure2: Sequence[int]) -> float:
    """Similarity of two graph structures judged by their sizes alone."""
    if not structure1 and not structure2:
        return 1.0
    if not structure1 or not structure2:
        return 0.0
    larger = max(len(structure1), len(structure2))
    return 1.0 - abs(len(structure1) - len(structure2)) / larger


def connected_components(graph: Graph) -> list[set[int]]:
    """Group node indices reachable along out-edges, starting from each unvisited node in order."""
    components: list[set[int]] = []
    visited: set[int] = set()
    for start in range(len(graph)):
        if start in visited:
            continue
        visited.add(start)
        component: set[int] = set()
        queue = deque([start])
        while queue:
            current = queue.popleft()
            component.add(current)
            for neighbor in graph.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        components.append(component)
    return components