"""Tests for the public API module."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from disjointset import (
    ElementNotFoundError,
    ReplayConfig,
    ScriptError,
    run_script,
    write_results,
)


def _read_jsonl(path: Path) -> list[dict]:
    """Read all JSONL lines from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


# ---------------------------------------------------------------------------
# run_script
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_run_script_defaults(write_script: Callable[..., Path]) -> None:
    """Test run_script replays with default strict config."""
    script = write_script("make a", "make b", "union a b", "find b")

    result = run_script(script)

    assert result.operations_applied == 4
    assert result.partitions == 1
    assert [r.result for r in result.results] == [None, None, "b", "a"]


@pytest.mark.unit
def test_run_script_accepts_str_path(write_script: Callable[..., Path]) -> None:
    """Test run_script accepts string paths."""
    script = write_script("make 1", "find 1")

    result = run_script(str(script), ReplayConfig(value_type="int"))

    assert result.results[1].result == 1


@pytest.mark.unit
def test_run_script_writes_output(
    tmp_path: Path,
    write_script: Callable[..., Path],
) -> None:
    """Test results are written when output_path is set."""
    script = write_script("make a", "find a")
    output = tmp_path / "out" / "results.jsonl"

    run_script(script, ReplayConfig(output_path=output))

    lines = _read_jsonl(output)
    assert len(lines) == 2
    assert lines[1]["result"] == "a"


@pytest.mark.unit
def test_run_script_strict_failure(write_script: Callable[..., Path]) -> None:
    """Test strict replay propagates ElementNotFoundError."""
    script = write_script("make a", "union a b")

    with pytest.raises(ElementNotFoundError, match="line 2"):
        run_script(script)


@pytest.mark.unit
def test_run_script_logs_script_error(
    tmp_path: Path,
    write_script: Callable[..., Path],
) -> None:
    """Test parse failures are logged and re-raised."""
    script = write_script("make a", "bogus a")
    log_path = tmp_path / "events.jsonl"

    with pytest.raises(ScriptError):
        run_script(script, ReplayConfig(audit_log_path=log_path))

    events = _read_jsonl(log_path)
    assert [e["event"] for e in events] == ["run_started", "error", "run_finished"]
    assert events[1]["data"]["exception_class"] == "ScriptError"
    assert events[1]["line"] == 2


@pytest.mark.unit
def test_run_script_missing_file(tmp_path: Path) -> None:
    """Test a missing script raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        run_script(tmp_path / "missing.txt")


@pytest.mark.unit
def test_run_script_logs_run_lifecycle(
    tmp_path: Path,
    write_script: Callable[..., Path],
) -> None:
    """Test a successful run logs start and finish with counters."""
    script = write_script("make a", "find a")
    log_path = tmp_path / "events.jsonl"

    run_script(script, ReplayConfig(audit_log_path=log_path))

    events = _read_jsonl(log_path)
    assert [e["event"] for e in events] == ["run_started", "run_finished"]
    assert events[0]["data"]["source"] == str(script)
    assert events[0]["data"]["parameters"]["strict"] is True
    assert events[1]["data"]["status"] == "success"
    assert events[1]["data"]["operations_applied"] == 2
    assert len({e["run_id"] for e in events}) == 1


# ---------------------------------------------------------------------------
# write_results
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_results_empty(tmp_path: Path) -> None:
    """Test writing no results creates an empty file."""
    path = tmp_path / "empty.jsonl"

    write_results([], path)

    assert path.exists()
    assert path.read_text() == ""
