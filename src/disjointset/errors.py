"""Exception types raised by the strict parts of the disjointset API.

The structure itself reports unregistered elements by returning None. These
exceptions are only raised by callers that opt into strict behavior
(``DisjointSet.require`` and strict script replay) and by the script parser.
"""

from collections.abc import Hashable

__all__ = ["DisjointSetError", "ElementNotFoundError", "ScriptError"]


class DisjointSetError(Exception):
    """Base class for disjointset errors."""


class ElementNotFoundError(DisjointSetError, KeyError):
    """Raised when a strict lookup names an unregistered element."""

    def __init__(self, value: Hashable, line_number: int | None = None) -> None:
        """Initialize element-not-found error.

        Parameters
        ----------
        value : Hashable
            The element that was never passed to ``make_set``.
        line_number : int | None, optional
            Script line that referenced the element, if any.
        """
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Element not found: {value!r}{location}")
        self.value = value
        self.line_number = line_number

    def __str__(self) -> str:
        return str(self.args[0])


class ScriptError(DisjointSetError):
    """Raised when an operation script cannot be parsed."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        """Initialize script error.

        Parameters
        ----------
        message : str
            Error message.
        line_number : int
            1-based line number of the offending line.
        line : str
            The offending line, stripped.
        """
        super().__init__(f"Line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line
