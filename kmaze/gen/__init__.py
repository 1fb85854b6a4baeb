"""
Maze generation.

Generators take an explicit random source so results are reproducible.
"""

from .disjoint_set import DisjointSet
from .kruskal import build_edges, generate, neighbor

__all__ = [
    "DisjointSet",
    "build_edges",
    "generate",
    "neighbor",
]
