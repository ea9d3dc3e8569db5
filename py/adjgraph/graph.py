"""In-memory adjacency-list graph."""
import logging
import threading
from typing import Iterator, KeysView, List, Optional, Tuple

from . import cycles, paths, traversal
from .types import (
    Adjacency, OpResult, OK, fail, normalize_name,
    INVALID_NAME, VERTEX_EXISTS, VERTEX_NOT_FOUND, EDGE_EXISTS, EDGE_NOT_FOUND,
)

logger = logging.getLogger(__name__)

RULE = "-----------------------------------"


class Graph:
    """Directed or undirected graph keyed by vertex name.

    Vertex names are trimmed and case-sensitive. Each vertex keeps its
    neighbours in insertion order, which is the order traversals follow.
    Invalid input never raises: mutations report failure through their
    return value and queries return empty results.

    Every operation runs under one reentrant lock, so a graph shared
    between threads is never observed mid-update.
    """

    def __init__(self, directed: bool = False):
        """Initialize an empty graph with fixed orientation."""
        self._directed = directed
        self._adj: Adjacency = {}
        self._lock = threading.RLock()

    @property
    def directed(self) -> bool:
        return self._directed

    def is_directed(self) -> bool:
        return self._directed

    # Mutation

    def try_add_vertex(self, name: Optional[str]) -> OpResult:
        """Add a vertex, reporting why it was rejected if it was."""
        key = normalize_name(name)
        if key is None:
            return self._reject("add_vertex", INVALID_NAME, vertex=name)
        with self._lock:
            if key in self._adj:
                return self._reject("add_vertex", VERTEX_EXISTS, vertex=key)
            self._adj[key] = []
        return OK

    def add_vertex(self, name: Optional[str]) -> bool:
        """Add a vertex.

        Args:
            name: Raw vertex name; surrounding whitespace is ignored

        Returns:
            True if the vertex was created, False if the name was empty or
            the vertex already exists
        """
        return bool(self.try_add_vertex(name))

    def try_add_edge(self, src: Optional[str], dst: Optional[str]) -> OpResult:
        """Add an edge, reporting why it was rejected if it was."""
        src_key, dst_key = normalize_name(src), normalize_name(dst)
        if src_key is None or dst_key is None:
            return self._reject("add_edge", INVALID_NAME, src=src, dst=dst)

        with self._lock:
            # Missing endpoints are created implicitly
            self._adj.setdefault(src_key, [])
            self._adj.setdefault(dst_key, [])

            # Duplicates are only checked in the src -> dst direction
            if dst_key in self._adj[src_key]:
                return self._reject("add_edge", EDGE_EXISTS, src=src_key, dst=dst_key)

            self._adj[src_key].append(dst_key)
            if not self._directed and src_key not in self._adj[dst_key]:
                self._adj[dst_key].append(src_key)
        return OK

    def add_edge(self, src: Optional[str], dst: Optional[str]) -> bool:
        """Add an edge from ``src`` to ``dst``, creating either vertex if needed.

        Undirected graphs also record the reverse direction.

        Returns:
            True if the edge was added, False for an empty name or an edge
            that already exists
        """
        return bool(self.try_add_edge(src, dst))

    def try_remove_edge(self, src: Optional[str], dst: Optional[str]) -> OpResult:
        """Remove an edge, reporting why nothing was removed if so."""
        src_key, dst_key = normalize_name(src), normalize_name(dst)
        with self._lock:
            if src_key not in self._adj or dst_key not in self._adj:
                return self._reject("remove_edge", VERTEX_NOT_FOUND, src=src, dst=dst)

            removed = _discard(self._adj[src_key], dst_key)
            if not self._directed:
                _discard(self._adj[dst_key], src_key)

        # The forward direction decides the outcome, even when undirected
        if not removed:
            return self._reject("remove_edge", EDGE_NOT_FOUND, src=src_key, dst=dst_key)
        return OK

    def remove_edge(self, src: Optional[str], dst: Optional[str]) -> bool:
        """Remove the edge from ``src`` to ``dst`` (both directions if undirected)."""
        return bool(self.try_remove_edge(src, dst))

    def try_remove_vertex(self, name: Optional[str]) -> OpResult:
        """Remove a vertex, reporting why nothing was removed if so."""
        key = normalize_name(name)
        with self._lock:
            if key not in self._adj:
                return self._reject("remove_vertex", VERTEX_NOT_FOUND, vertex=name)
            del self._adj[key]
            for neighbors in self._adj.values():
                _discard(neighbors, key)
        return OK

    def remove_vertex(self, name: Optional[str]) -> bool:
        """Remove a vertex and every edge pointing at it."""
        return bool(self.try_remove_vertex(name))

    # Queries

    def contains_vertex(self, name: Optional[str]) -> bool:
        if name is None:
            return False
        with self._lock:
            return name.strip() in self._adj

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_vertex(name)

    def get_vertices(self) -> KeysView[str]:
        """Live, read-only view of the vertex names in storage order.

        The view is not locked: do not iterate it while another thread
        mutates the graph.
        """
        return self._adj.keys()

    def __iter__(self) -> Iterator[str]:
        """Iterate vertex names; unlocked, like ``get_vertices``."""
        return iter(self._adj)

    def neighbors(self, name: Optional[str]) -> Tuple[str, ...]:
        """Snapshot of a vertex's neighbours in insertion order.

        Unknown or empty names give an empty tuple.
        """
        key = normalize_name(name)
        with self._lock:
            return tuple(self._adj.get(key, ())) if key is not None else ()

    def vertex_count(self) -> int:
        with self._lock:
            return len(self._adj)

    def __len__(self) -> int:
        return self.vertex_count()

    def edge_count(self) -> int:
        """Number of edges; each undirected edge is counted once."""
        with self._lock:
            count = sum(len(neighbors) for neighbors in self._adj.values())
        return count if self._directed else count // 2

    def edges(self) -> List[Tuple[str, str]]:
        """All edges as (src, dst) pairs in storage order.

        For undirected graphs each edge is listed once, in the direction
        it is first met. A self-loop is stored once rather than mirrored,
        so it appears here but contributes nothing to ``edge_count()``.
        """
        result = []
        seen = set()
        with self._lock:
            for src, neighbors in self._adj.items():
                for dst in neighbors:
                    if not self._directed:
                        if (dst, src) in seen:
                            continue
                        seen.add((src, dst))
                    result.append((src, dst))
        return result

    # Algorithms

    def bfs(self, start: Optional[str]) -> List[str]:
        """Breadth-first visitation order from ``start``; empty if unknown."""
        key = normalize_name(start)
        if key is None:
            return []
        with self._lock:
            return traversal.bfs_order(self._adj, key)

    def dfs(self, start: Optional[str]) -> List[str]:
        """Depth-first visitation order from ``start``; empty if unknown."""
        key = normalize_name(start)
        if key is None:
            return []
        with self._lock:
            return traversal.dfs_order(self._adj, key)

    def shortest_path(self, start: Optional[str], end: Optional[str]) -> List[str]:
        """Fewest-edges path ``[start, ..., end]``; empty if none exists."""
        start_key, end_key = normalize_name(start), normalize_name(end)
        if start_key is None or end_key is None:
            return []
        with self._lock:
            return paths.shortest_path(self._adj, start_key, end_key)

    def distance(self, start: Optional[str], end: Optional[str]) -> int:
        """Edges on the shortest path, or -1 when there is no path."""
        return paths.path_distance(self.shortest_path(start, end))

    def has_directed_cycle(self) -> bool:
        """Whether a directed graph contains a cycle.

        Always False for undirected graphs, where every edge would
        otherwise count as a two-vertex cycle.
        """
        if not self._directed:
            return False
        with self._lock:
            return cycles.has_directed_cycle(self._adj)

    # Rendering

    def describe(self) -> str:
        """Human-readable dump: header, counts, then one line per vertex."""
        kind = "Directed" if self._directed else "Undirected"
        with self._lock:
            lines = [
                f"--- Graph ({kind}) ---",
                f"Vertices: {self.vertex_count()} | Edges: {self.edge_count()}",
            ]
            for vertex, neighbors in self._adj.items():
                lines.append(f"{vertex} : [{', '.join(neighbors)}]")
        lines.append(RULE)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"Graph(directed={self._directed}, vertices={self.vertex_count()}, "
                f"edges={self.edge_count()})")

    def _reject(self, op: str, reason: str, **fields) -> OpResult:
        logger.debug("%s rejected: %s", op, reason, extra={"op": op, "reason": reason, **fields})
        return fail(reason)


def _discard(neighbors: List[str], name: Optional[str]) -> bool:
    """Remove ``name`` from a neighbour list if present."""
    try:
        neighbors.remove(name)
    except ValueError:
        return False
    return True


SEED_EDGES = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]
DIRECTED_SEED_EDGES = [("D", "E")]


def seed_graph(graph: Graph) -> Graph:
    """Add the starter edges used by the interactive menu."""
    for src, dst in SEED_EDGES:
        graph.add_edge(src, dst)
    if graph.directed:
        for src, dst in DIRECTED_SEED_EDGES:
            graph.add_edge(src, dst)
    return graph
