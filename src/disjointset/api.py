"""Public API for replaying operation scripts.

This module provides the high-level entry points used by the CLI:
- Running an operation script end to end with audit logging
- Exporting per-operation results to JSONL
"""

import json
import time
from pathlib import Path

from disjointset.audit import AuditLogger, generate_run_id
from disjointset.errors import DisjointSetError, ElementNotFoundError
from disjointset.replay import OperationResult, ReplayConfig, ReplayResult, parse_script, replay

__all__ = ["run_script", "write_results"]


def write_results(results: list[OperationResult], path: str | Path) -> None:
    """Write operation results to JSONL file (one JSON object per line).

    Parameters
    ----------
    results : list[OperationResult]
        Results to write, in script order.
    path : str | Path
        Output file path.

    Examples
    --------
        >>> from disjointset import run_script, write_results
        >>> result = run_script("ops.txt")
        >>> write_results(result.results, "results.jsonl")
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for result in results:
            f.write(json.dumps(result.to_dict(), ensure_ascii=False) + "\n")


def run_script(
    script_path: str | Path,
    config: ReplayConfig | None = None,
) -> ReplayResult:
    """Parse and replay an operation script against a fresh forest.

    Parameters
    ----------
    script_path : str | Path
        Path to the operation script.
    config : ReplayConfig | None, optional
        Replay configuration. If None, uses defaults (strict, string values,
        no audit log, no results file).

    Returns
    -------
    ReplayResult
        Per-operation results and final counters.

    Raises
    ------
    FileNotFoundError
        If the script does not exist.
    ScriptError
        If the script is malformed.
    ElementNotFoundError
        In strict mode, when find/union names an unregistered element.

    Examples
    --------
        >>> from disjointset import ReplayConfig, run_script
        >>> result = run_script("ops.txt", ReplayConfig(strict=False))
        >>> print(result.partitions, result.not_found)
    """
    script_path = Path(script_path)
    if config is None:
        config = ReplayConfig()

    logger: AuditLogger | None = None
    if config.audit_log_path is not None:
        logger = AuditLogger(generate_run_id(), config.audit_log_path, min_level=config.log_level)

    start = time.perf_counter()
    try:
        if logger:
            logger.run_started(str(script_path), config.to_dict())

        operations = parse_script(script_path, config.value_type)
        result = replay(operations, config, logger)

        if config.output_path is not None:
            write_results(result.results, config.output_path)

        if logger:
            logger.run_finished(
                "success", time.perf_counter() - start, result.operations_applied
            )
        return result

    except DisjointSetError as e:
        if logger:
            # Strict replay failures are already logged where they are raised
            if not isinstance(e, ElementNotFoundError):
                logger.error(type(e).__name__, str(e), line=getattr(e, "line_number", None))
            logger.run_finished("failed", time.perf_counter() - start)
        raise

    finally:
        if logger:
            logger.close()
