"""Directed cycle detection."""
import logging

from .types import AdjacencyView, BLACK, GRAY, WHITE

logger = logging.getLogger(__name__)


def has_directed_cycle(adj: AdjacencyView) -> bool:
    """Check a directed adjacency mapping for a cycle.

    Three-colour DFS over every vertex in storage order: a gray neighbour
    is a back edge. Neighbours that are not vertices of ``adj`` are skipped.
    The walk uses an explicit stack rather than recursion.
    """
    color = {node: WHITE for node in adj}

    for root in adj:
        if color[root] != WHITE:
            continue

        color[root] = GRAY
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                state = color.get(neighbor)
                if state is None or state == BLACK:
                    continue
                if state == GRAY:
                    logger.debug("back edge", extra={"src": node, "dst": neighbor})
                    return True
                color[neighbor] = GRAY
                stack.append((neighbor, iter(adj[neighbor])))
                break
            else:
                color[node] = BLACK
                stack.pop()

    return False
