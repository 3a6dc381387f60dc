"""Disjoint-set forest: singleton creation, find with path compression, union by rank."""

from disjointset.forest.disjoint_set import DisjointSet
from disjointset.forest.models import ForestStats, Node

__all__ = ["DisjointSet", "ForestStats", "Node"]
