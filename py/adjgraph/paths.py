"""Pathfinding on unweighted graphs: shortest path and distance."""
import logging
from collections import deque
from typing import Dict, List, Optional, Sequence

from .types import AdjacencyView

logger = logging.getLogger(__name__)


def shortest_path(adj: AdjacencyView, start: str, end: str) -> List[str]:
    """Find the fewest-edges path from ``start`` to ``end`` using BFS.

    Args:
        adj: Adjacency mapping to search
        start: Source vertex
        end: Target vertex

    Returns:
        ``[start, ..., end]``, or an empty list when either endpoint is
        unknown or ``end`` is unreachable. ``start == end`` gives ``[start]``.
    """
    if start not in adj or end not in adj:
        return []

    # Predecessors are recorded at enqueue time; start has none.
    parent: Dict[str, Optional[str]] = {start: None}
    queue = deque([start])

    while queue:
        node = queue.popleft()
        if node == end:
            break
        for neighbor in adj.get(node, ()):
            if neighbor not in parent:
                parent[neighbor] = node
                queue.append(neighbor)

    if end not in parent:
        logger.debug("no path", extra={"start": start, "end": end})
        return []

    path = []
    current: Optional[str] = end
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path


def path_distance(path: Sequence[str]) -> int:
    """Number of edges along ``path``; -1 for an empty (missing) path."""
    return len(path) - 1 if path else -1
