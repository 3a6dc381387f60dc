"""Structured audit logger for JSONL event logging.

Provides append-only structured event logging to JSONL files with
a persistent file handle for efficient I/O.
"""

import json
from collections.abc import Hashable, Sequence
from dataclasses import asdict
from pathlib import Path
from typing import Any

from disjointset.audit.helpers import get_package_version
from disjointset.audit.models import LEVELS, LogEvent
from disjointset.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """JSONL audit logger with persistent file handle.

    Writes structured log events to a JSONL file (one JSON object per line).
    Events are append-only and flushed after each write. Events below
    ``min_level`` are dropped.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path
        Path to JSONL log file.
    min_level : str
        Lowest level that is written.
    """

    def __init__(self, run_id: str, log_path: Path, min_level: str = "DEBUG") -> None:
        """Initialize audit logger and open file handle.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        log_path : Path
            Path to JSONL log file.
        min_level : str, optional
            Lowest level to write, by default "DEBUG".
        """
        if min_level not in LEVELS:
            raise ValueError(f"min_level must be one of {LEVELS}, got {min_level!r}")

        self.run_id = run_id
        self.log_path = log_path
        self.min_level = min_level

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush and close the log file handle."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        op: str | None = None,
        line: int | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "run_started").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        op : str | None, optional
            Operation verb the event refers to.
        line : int | None, optional
            Script line number the event refers to.
        """
        if LEVELS.index(level) < LEVELS.index(self.min_level):
            return

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            op=op,
            line=line,
        )

        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        json.dump(
            event_dict,
            self._file,
            ensure_ascii=False,
            separators=(",", ":"),
            default=repr,
        )
        self._file.write("\n")
        self._file.flush()

    def run_started(self, source: str, parameters: dict[str, Any]) -> None:
        """Log run_started event.

        Parameters
        ----------
        source : str
            Script being replayed.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.event(
            "run_started",
            data={
                "source": source,
                "parameters": parameters,
                "package_version": get_package_version(),
            },
        )

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        operations_applied: int | None = None,
    ) -> None:
        """Log run_finished event.

        Parameters
        ----------
        status : str
            Run status ("success", "failed").
        duration_seconds : float
            Total execution time in seconds.
        operations_applied : int | None, optional
            Number of operations applied before the run ended.
        """
        data: dict[str, Any] = {
            "status": status,
            "duration_seconds": duration_seconds,
        }
        if operations_applied is not None:
            data["operations_applied"] = operations_applied

        self.event("run_finished", data=data)

    def operation_applied(
        self,
        op: str,
        line: int,
        args: Sequence[Hashable],
        result: Hashable | None,
    ) -> None:
        """Log operation_applied event at DEBUG level."""
        self.event(
            "operation_applied",
            data={"args": list(args), "result": result},
            level="DEBUG",
            op=op,
            line=line,
        )

    def element_not_found(self, op: str, line: int, args: Sequence[Hashable]) -> None:
        """Log element_not_found event at WARN level.

        Parameters
        ----------
        op : str
            Operation verb ("find" or "union").
        line : int
            Script line number.
        args : Sequence[Hashable]
            Operation arguments, at least one of which is unregistered.
        """
        self.event("element_not_found", data={"args": list(args)}, level="WARN", op=op, line=line)

    def error(
        self,
        exception_class: str,
        message: str,
        op: str | None = None,
        line: int | None = None,
    ) -> None:
        """Log error event.

        Parameters
        ----------
        exception_class : str
            Exception class name.
        message : str
            Error message.
        op : str | None, optional
            Operation being applied when the error occurred.
        line : int | None, optional
            Script line number.
        """
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
            op=op,
            line=line,
        )
