"""Command-line interface for disjointset.

Provides a CLI command for replaying operation scripts.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("disjointset")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="disjointset")
def cli() -> None:
    """Disjoint-set (union-find) forest with path compression and union by rank.

    Use 'disjointset COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write per-operation results to this JSONL file",
)
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append structured audit events to this JSONL file",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Record unregistered elements as null instead of failing",
)
@click.option(
    "--int-values",
    is_flag=True,
    help="Treat script values as integers instead of strings",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (also logs every operation to the audit log)",
)
def replay(
    script: str,
    output: str | None,
    audit_log: str | None,
    lenient: bool,
    int_values: bool,
    verbose: bool,
) -> None:
    """Replay the operations in SCRIPT against a fresh disjoint-set forest.

    SCRIPT holds one operation per line: 'make VALUE', 'find VALUE' or
    'union VALUE_ONE VALUE_TWO'. Blank lines and '#' comments are skipped.

    Examples
    --------
        disjointset replay ops.txt
        disjointset replay ops.txt -o results.jsonl --audit-log events.jsonl
        disjointset replay edges.txt --int-values --lenient
    """
    from disjointset import DisjointSetError, ReplayConfig, run_script

    try:
        config = ReplayConfig(
            strict=not lenient,
            value_type="int" if int_values else "str",
            audit_log_path=Path(audit_log) if audit_log else None,
            output_path=Path(output) if output else None,
            log_level="DEBUG" if verbose else "INFO",
        )

        if verbose:
            click.echo(f"Replaying: {script}", err=True)
            click.echo(f"  Mode: {'lenient' if lenient else 'strict'}", err=True)
            click.echo(f"  Values: {config.value_type}", err=True)

        result = run_script(script, config)

        if verbose:
            for outcome in result.results:
                op = outcome.operation
                args = " ".join(str(a) for a in op.args)
                click.echo(
                    f"  {op.line_number}: {op.kind.value} {args} -> {outcome.result}",
                    err=True,
                )

        click.secho(
            f"✓ Applied {result.operations_applied} operations: "
            f"{result.elements} elements in {result.partitions} partitions"
            + (f" ({result.not_found} not found)" if result.not_found else ""),
            fg="green",
        )

    except (DisjointSetError, ValueError) as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
