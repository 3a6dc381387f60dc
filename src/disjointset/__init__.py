"""Disjoint-set (union-find) forest with path compression and union by rank.

This package provides:
- Forest (disjointset.forest) — the DisjointSet structure and its node model
- Replay (disjointset.replay) — operation script parsing and replay
- Audit (disjointset.audit) — JSONL event logging
- CLI (disjointset.cli) — command-line interface
- Public API (disjointset.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from disjointset.api import run_script, write_results
from disjointset.errors import DisjointSetError, ElementNotFoundError, ScriptError
from disjointset.forest import DisjointSet, ForestStats
from disjointset.replay import ReplayConfig, ReplayResult

__all__ = [
    "__version__",
    "__license__",
    "DisjointSet",
    "ForestStats",
    "DisjointSetError",
    "ElementNotFoundError",
    "ScriptError",
    "ReplayConfig",
    "ReplayResult",
    "run_script",
    "write_results",
]
