"""Adjacency-list graph library - public API."""
from .types import (
    OpResult, INVALID_NAME, VERTEX_EXISTS, VERTEX_NOT_FOUND, EDGE_EXISTS, EDGE_NOT_FOUND
)
from .graph import Graph, seed_graph
from .traversal import bfs_order, dfs_order, format_walk
from .paths import shortest_path, path_distance
from .cycles import has_directed_cycle
from .menu import Menu, run_menu

__all__ = [
    'Graph', 'seed_graph', 'OpResult',
    'INVALID_NAME', 'VERTEX_EXISTS', 'VERTEX_NOT_FOUND', 'EDGE_EXISTS', 'EDGE_NOT_FOUND',
    'bfs_order', 'dfs_order', 'format_walk',
    'shortest_path', 'path_distance', 'has_directed_cycle',
    'Menu', 'run_menu',
]
