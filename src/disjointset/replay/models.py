"""Data models for operation scripts."""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class OpKind(StrEnum):
    """Operation verbs understood by the script parser.

    Attributes
    ----------
    MAKE : str
        Register a singleton (``make <value>``).
    FIND : str
        Look up a representative (``find <value>``).
    UNION : str
        Merge two partitions (``union <value_one> <value_two>``).
    """

    MAKE = "make"
    FIND = "find"
    UNION = "union"

    @property
    def arity(self) -> int:
        """Number of arguments the verb takes."""
        return 2 if self is OpKind.UNION else 1


@dataclass(frozen=True)
class Operation:
    """A single parsed script operation.

    Attributes
    ----------
    kind : OpKind
        Operation verb.
    args : tuple[Hashable, ...]
        Converted operation arguments.
    line_number : int
        1-based source line.
    """

    kind: OpKind
    args: tuple[Hashable, ...]
    line_number: int


@dataclass(frozen=True)
class OperationResult:
    """Outcome of applying one operation.

    Attributes
    ----------
    operation : Operation
        The operation that was applied.
    result : Hashable | None
        Value returned by the structure (None for ``make`` and for
        unregistered elements).
    found : bool
        False when ``find``/``union`` named an unregistered element.
    """

    operation: Operation
    result: Hashable | None
    found: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "line": self.operation.line_number,
            "op": self.operation.kind.value,
            "args": list(self.operation.args),
            "result": self.result,
            "found": self.found,
        }
