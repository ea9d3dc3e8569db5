"""Type definitions for the adjacency-list graph."""
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence

# Vertex name -> ordered neighbour names
Adjacency = Dict[str, List[str]]
AdjacencyView = Mapping[str, Sequence[str]]

# Failure reasons reported by OpResult
INVALID_NAME = "invalid_name"
VERTEX_EXISTS = "vertex_exists"
VERTEX_NOT_FOUND = "vertex_not_found"
EDGE_EXISTS = "edge_exists"
EDGE_NOT_FOUND = "edge_not_found"

# Colours for directed cycle detection
WHITE, GRAY, BLACK = 0, 1, 2


class OpResult(NamedTuple):
    """Outcome of a graph mutation.

    Truthy iff the mutation took effect, so it can stand in wherever a
    plain boolean is expected.
    """
    success: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success


OK = OpResult(True)


def fail(reason: str) -> OpResult:
    """Build a failed result carrying a reason code."""
    return OpResult(False, reason)


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Trim a raw vertex name, returning None when nothing usable is left."""
    if name is None:
        return None
    name = name.strip()
    return name or None
