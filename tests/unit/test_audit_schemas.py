"""Tests for schema validation of audit events."""

import json
from collections.abc import Callable
from pathlib import Path

import jsonschema
import pytest

from disjointset import ElementNotFoundError, ReplayConfig, run_script

_SCHEMAS_DIR = Path(__file__).parent.parent.parent / "schemas"


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    with (_SCHEMAS_DIR / "log_event.schema.json").open() as f:
        return json.load(f)


def _validate_log(path: Path, schema: dict) -> list[dict]:
    """Validate every line of a JSONL log and return the events."""
    events = []
    with path.open() as f:
        for line in f:
            event = json.loads(line)
            jsonschema.validate(instance=event, schema=schema)
            events.append(event)
    return events


@pytest.mark.unit
def test_generated_events_validate(
    tmp_path: Path,
    event_schema: dict,
    write_script: Callable[..., Path],
) -> None:
    """Test events from a lenient verbose run validate against schema."""
    script = write_script("make a", "make b", "union a b", "find c")
    log_path = tmp_path / "events.jsonl"

    run_script(
        script,
        ReplayConfig(strict=False, audit_log_path=log_path, log_level="DEBUG"),
    )

    events = _validate_log(log_path, event_schema)
    assert {e["event"] for e in events} == {
        "run_started",
        "operation_applied",
        "element_not_found",
        "run_finished",
    }


@pytest.mark.unit
def test_failed_run_events_validate(
    tmp_path: Path,
    event_schema: dict,
    write_script: Callable[..., Path],
) -> None:
    """Test events from a failed strict run validate against schema."""
    script = write_script("make a", "find b")
    log_path = tmp_path / "events.jsonl"

    with pytest.raises(ElementNotFoundError):
        run_script(script, ReplayConfig(audit_log_path=log_path))

    events = _validate_log(log_path, event_schema)
    assert [e["event"] for e in events] == ["run_started", "error", "run_finished"]
    assert events[-1]["data"]["status"] == "failed"


@pytest.mark.unit
def test_invalid_event_fails_validation(event_schema: dict) -> None:
    """Test schema rejects events with unknown levels or missing fields."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(
            instance={
                "ts": "2026-01-01T00:00:00Z",
                "run_id": "r",
                "level": "TRACE",
                "event": "run_started",
                "data": {},
                "op": None,
                "line": None,
            },
            schema=event_schema,
        )

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"ts": "x", "run_id": "x"}, schema=event_schema)
