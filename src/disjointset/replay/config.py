"""Replay configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from disjointset.audit.models import LEVELS
from disjointset.replay.models import OperationResult

VALUE_TYPES: tuple[str, ...] = ("str", "int")


@dataclass
class ReplayConfig:
    """Configuration for replaying an operation script.

    Attributes
    ----------
    strict : bool
        Raise ElementNotFoundError when find/union names an unregistered
        element. When False the result is recorded as None.
    value_type : str
        How script tokens are converted: 'str' or 'int'.
    audit_log_path : Path | None
        JSONL audit log destination. If None, no events are written.
    output_path : Path | None
        JSONL results destination. If None, results are only returned.
    log_level : str
        Lowest audit event level written (default: INFO).
    """

    strict: bool = True
    value_type: str = "str"
    audit_log_path: Path | None = None
    output_path: Path | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Normalize paths and validate."""
        if self.value_type not in VALUE_TYPES:
            raise ValueError(f"value_type must be one of {VALUE_TYPES}, got {self.value_type!r}")

        if self.log_level not in LEVELS:
            raise ValueError(f"log_level must be one of {LEVELS}, got {self.log_level!r}")

        if self.audit_log_path is not None:
            self.audit_log_path = Path(self.audit_log_path)

        if self.output_path is not None:
            self.output_path = Path(self.output_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["audit_log_path"] = str(self.audit_log_path) if self.audit_log_path else None
        data["output_path"] = str(self.output_path) if self.output_path else None
        return data


@dataclass
class ReplayResult:
    """Results from replaying a script.

    Attributes
    ----------
    operations_applied : int
        Number of operations applied.
    not_found : int
        Number of find/union operations that named an unregistered element
        (lenient mode only; strict mode raises instead).
    elements : int
        Registered elements at the end of the run.
    partitions : int
        Distinct partitions at the end of the run.
    results : list[OperationResult]
        Per-operation outcomes, in script order.
    """

    operations_applied: int
    not_found: int
    elements: int
    partitions: int
    results: list[OperationResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "operations_applied": self.operations_applied,
            "not_found": self.not_found,
            "elements": self.elements,
            "partitions": self.partitions,
            "results": [r.to_dict() for r in self.results],
        }
