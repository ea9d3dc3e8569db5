"""Graph traversal algorithms: BFS and DFS."""
import logging
from collections import deque
from typing import List, Sequence

from .types import AdjacencyView

logger = logging.getLogger(__name__)

WALK_SEPARATOR = " -> "


def bfs_order(adj: AdjacencyView, start: str) -> List[str]:
    """Breadth-first visitation order from ``start``.

    Vertices are marked visited when enqueued, and neighbours are expanded
    in stored order. An unknown start yields an empty list.
    """
    if start not in adj:
        return []

    order = []
    visited = {start}
    queue = deque([start])

    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adj.get(node, ()):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    logger.debug("bfs finished", extra={"start": start, "visited": len(order)})
    return order


def dfs_order(adj: AdjacencyView, start: str) -> List[str]:
    """Depth-first pre-order from ``start``.

    Equivalent to visiting ``start`` and then recursing into each unvisited
    neighbour in stored order, but driven by an explicit stack of
    (vertex, neighbour iterator) pairs so long chains do not hit the
    interpreter's recursion limit.
    """
    if start not in adj:
        return []

    order = [start]
    visited = {start}
    stack = [(start, iter(adj.get(start, ())))]

    while stack:
        node, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append((neighbor, iter(adj.get(neighbor, ()))))
                break
        else:
            stack.pop()

    logger.debug("dfs finished", extra={"start": start, "visited": len(order)})
    return order


def format_walk(order: Sequence[str]) -> str:
    """Render a visitation order as ``"A -> B -> C"``."""
    return WALK_SEPARATOR.join(order)
