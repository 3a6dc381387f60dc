"""Data models for audit logging."""

from dataclasses import dataclass, field
from typing import Any

__all__ = ["LogEvent", "LEVELS"]

LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class LogEvent:
    """Structured log event.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp.
    run_id : str
        Run identifier.
    level : str
        Log level (DEBUG, INFO, WARN, ERROR).
    event : str
        Event type.
    data : dict[str, Any]
        Event-specific data.
    op : str | None
        Operation verb the event refers to, if any.
    line : int | None
        Script line number the event refers to, if any.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    op: str | None = None
    line: int | None = None
