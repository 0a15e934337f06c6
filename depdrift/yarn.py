"""Yarn `outdated` report source."""

import json
import subprocess
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .errors import ReportFormatError, YarnError
from .models import PackageRecord


class TableData(BaseModel):
    """Payload of a yarn `table` event."""

    body: list[list[str]]


class TableEvent(BaseModel):
    """A single `{"type": "table", "data": {...}}` line of yarn JSON output."""

    type: str
    data: TableData


def run_yarn_outdated(
    path: str | Path,
    yarn_bin: str = "yarn",
    timeout: float | None = None,
) -> str:
    """Run `yarn outdated --json` in a project directory.

    Args:
        path: Project directory
        yarn_bin: Yarn executable to invoke
        timeout: Seconds to wait before giving up

    Returns:
        Raw stdout of yarn

    Raises:
        YarnError: If yarn is missing, times out or reports an error
    """
    try:
        completed = subprocess.run(
            [yarn_bin, "outdated", "--json"],
            cwd=str(path),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise YarnError(f"{yarn_bin} executable not found") from e
    except subprocess.TimeoutExpired as e:
        raise YarnError(f"Timeout running {yarn_bin} outdated after {timeout}s") from e

    errors = _error_messages(completed.stderr)
    if errors:
        raise YarnError("; ".join(errors))

    # Exit code 1 with a table only means some packages are outdated
    if completed.returncode == 1 and _has_table(completed.stdout):
        return completed.stdout
    if completed.returncode != 0:
        details = completed.stderr.strip() or completed.stdout.strip()
        raise YarnError(
            f"{yarn_bin} outdated exited with code {completed.returncode}: {details}"
        )

    return completed.stdout


def parse_outdated_output(text: str) -> list[PackageRecord]:
    """Decode yarn's line-delimited JSON into package records.

    Args:
        text: Output of `yarn outdated --json`

    Returns:
        Records in table order, empty if yarn printed no table

    Raises:
        ReportFormatError: If the table event is malformed
    """
    for event in _events(text):
        if event.get("type") != "table":
            continue
        try:
            table = TableEvent.model_validate(event)
        except ValidationError as e:
            raise ReportFormatError(f"Invalid yarn table: {e}")
        return [PackageRecord.from_row(row) for row in table.data.body]

    return []


def _events(text: str) -> list[dict]:
    """Parse each JSON object line, skipping anything else."""
    events = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped.startswith("{"):
            continue
        try:
            event = json.loads(stripped)
        except json.JSONDecodeError:
            continue
        if isinstance(event, dict):
            events.append(event)
    return events


def _has_table(text: str) -> bool:
    return any(event.get("type") == "table" for event in _events(text))


def _error_messages(text: str) -> list[str]:
    return [str(event.get("data", "")) for event in _events(text) if event.get("type") == "error"]
