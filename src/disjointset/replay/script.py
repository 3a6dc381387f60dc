"""Operation script parser.

Scripts hold one operation per line::

    # comment
    make a
    union a b
    find b

Blank lines and lines starting with ``#`` are skipped.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator
from pathlib import Path

from disjointset.errors import ScriptError
from disjointset.replay.models import Operation, OpKind

__all__ = ["parse_line", "parse_lines", "parse_script"]

_CONVERTERS: dict[str, Callable[[str], Hashable]] = {
    "str": str,
    "int": int,
}


def parse_line(line: str, line_number: int, value_type: str = "str") -> Operation | None:
    """Parse a single script line.

    Parameters
    ----------
    line : str
        Raw line text.
    line_number : int
        1-based line number, for error reporting.
    value_type : str, optional
        Token conversion, 'str' or 'int', by default 'str'.

    Returns
    -------
    Operation | None
        Parsed operation, or None for blank and comment lines.

    Raises
    ------
    ScriptError
        On unknown verbs, wrong argument counts or unconvertible tokens.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    verb, *tokens = stripped.split()
    try:
        kind = OpKind(verb.lower())
    except ValueError:
        raise ScriptError(f"unknown operation {verb!r}", line_number, stripped) from None

    if len(tokens) != kind.arity:
        raise ScriptError(
            f"{kind.value} takes {kind.arity} argument(s), got {len(tokens)}",
            line_number,
            stripped,
        )

    convert = _CONVERTERS[value_type]
    try:
        args = tuple(convert(token) for token in tokens)
    except ValueError:
        raise ScriptError(f"values must be {value_type}", line_number, stripped) from None

    return Operation(kind=kind, args=args, line_number=line_number)


def parse_lines(lines: Iterable[str], value_type: str = "str") -> Iterator[Operation]:
    """Parse script lines lazily.

    Parameters
    ----------
    lines : Iterable[str]
        Script lines.
    value_type : str, optional
        Token conversion, 'str' or 'int', by default 'str'.

    Yields
    ------
    Operation
        Parsed operations in script order.
    """
    if value_type not in _CONVERTERS:
        raise ValueError(f"Unknown value type: {value_type!r}")

    for line_number, line in enumerate(lines, start=1):
        operation = parse_line(line, line_number, value_type)
        if operation is not None:
            yield operation


def parse_script(path: Path, value_type: str = "str") -> list[Operation]:
    """Parse an operation script file.

    Parameters
    ----------
    path : Path
        Script file.
    value_type : str, optional
        Token conversion, 'str' or 'int', by default 'str'.

    Returns
    -------
    list[Operation]
        Parsed operations.

    Raises
    ------
    FileNotFoundError
        If the script does not exist.
    ScriptError
        If any line is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Script not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return list(parse_lines(f, value_type))
