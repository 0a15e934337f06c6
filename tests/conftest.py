"""Pytest configuration and fixtures."""

import json

import pytest

from depdrift.models import PackageRecord

TABLE_HEAD = ["Package", "Current", "Wanted", "Latest", "Package Type", "URL"]


def yarn_table_line(body: list[list[str]]) -> str:
    """Build a `table` event line as printed by `yarn outdated --json`."""
    return json.dumps({"type": "table", "data": {"head": TABLE_HEAD, "body": body}})


@pytest.fixture
def sample_records():
    """Records covering each classification outcome."""
    return [
        PackageRecord("a", "1.0.0", "2.0.0"),
        PackageRecord("b", "1.0.0", "1.0.0"),
        PackageRecord("c", "1.2.3", "1.2.4"),
        PackageRecord("d", "x.y.z", "1.0.0"),
    ]


@pytest.fixture
def sample_yarn_output():
    """Sample `yarn outdated --json` output."""
    info = json.dumps({
        "type": "info",
        "data": "Color legend : \n \"<red>\"    : Major Update backward-incompatible updates",
    })
    table = yarn_table_line([
        ["react", "16.14.0", "16.14.0", "18.2.0", "dependencies", "https://reactjs.org/"],
        ["lodash", "4.17.20", "4.17.21", "4.17.21", "dependencies", "https://lodash.com/"],
        ["eslint", "8.40.0", "8.57.0", "8.57.0", "devDependencies", "https://eslint.org"],
        ["left-pad", "exotic", "exotic", "1.3.0", "dependencies", "https://github.com/left-pad"],
    ])
    return f"{info}\n{table}\n"


@pytest.fixture
def yarn_project(tmp_path):
    """Create a minimal yarn project directory."""
    (tmp_path / "package.json").write_text('{"name": "test-project", "dependencies": {}}')
    (tmp_path / "yarn.lock").write_text("")
    return tmp_path


@pytest.fixture
def make_yarn_output():
    """Build `yarn outdated --json` output from table rows."""

    def _make(body: list[list[str]]) -> str:
        return yarn_table_line(body) + "\n"

    return _make
