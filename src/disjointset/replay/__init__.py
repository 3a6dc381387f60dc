"""Operation scripts: parsing and replay against a disjoint-set forest."""

from disjointset.replay.config import ReplayConfig, ReplayResult
from disjointset.replay.models import Operation, OperationResult, OpKind
from disjointset.replay.runner import apply_operation, replay
from disjointset.replay.script import parse_line, parse_lines, parse_script

__all__ = [
    "OpKind",
    "Operation",
    "OperationResult",
    "ReplayConfig",
    "ReplayResult",
    "apply_operation",
    "parse_line",
    "parse_lines",
    "parse_script",
    "replay",
]
