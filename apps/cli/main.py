"""CLI application for DepDrift."""

import sys
import time
from pathlib import Path

import typer
from rich.console import Console

from depdrift.classify import classify
from depdrift.detect import identify
from depdrift.errors import EmptyReportError
from depdrift.report import render
from depdrift.yarn import parse_outdated_output, run_yarn_outdated

console = Console()


def print_notice(line: str) -> None:
    """Print a classifier notice verbatim."""
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    console.print(f"Error: {message}", style="red", markup=False, soft_wrap=True)


def read_report_file(report_file: str) -> str:
    """Read saved `yarn outdated --json` output from a file or stdin."""
    if report_file == "-":
        return sys.stdin.read()

    path_obj = Path(report_file)
    if not path_obj.is_file():
        print_error(f"File {report_file} not found")
        raise typer.Exit(1)
    return path_obj.read_text()


def collect_yarn_output(
    working_directory: str, yarn_bin: str, timeout: float | None
) -> str:
    """Run yarn in a project directory, reporting how long it took."""
    path_obj = Path(working_directory)
    if not path_obj.is_dir():
        print_error(f"Directory {working_directory} not found")
        raise typer.Exit(1)

    if identify(path_obj) == "unknown":
        print_error(f"No package.json found in {working_directory}")
        raise typer.Exit(1)

    console.print("Running `yarn outdated`... ", end="", markup=False)
    start = time.perf_counter()
    output = run_yarn_outdated(path_obj, yarn_bin=yarn_bin, timeout=timeout)
    console.print(f"{time.perf_counter() - start:.2f}s", highlight=False)
    return output


app = typer.Typer(
    name="depdrift",
    help="DepDrift - Summarize how far yarn dependencies have drifted from their latest versions",
    add_completion=False,
)


@app.command()
def report(
    working_directory: str | None = typer.Argument(
        None, help="Yarn project directory to run `yarn outdated` in (default: current directory)"
    ),
    report_file: str | None = typer.Option(
        None, "--report-file", "-f", help="Saved `yarn outdated --json` output (use '-' for stdin)"
    ),
    yarn_bin: str = typer.Option("yarn", "--yarn-bin", help="Yarn executable"),
    timeout: float | None = typer.Option(None, "--timeout", help="Seconds to wait for yarn"),
) -> None:
    """DepDrift - Count outdated dependencies by major, minor and patch drift."""

    try:
        if report_file is not None and working_directory is not None:
            print_error("Pass either WORKING_DIRECTORY or --report-file, not both")
            raise typer.Exit(1)

        if report_file is not None:
            output = read_report_file(report_file)
        else:
            output = collect_yarn_output(working_directory or ".", yarn_bin, timeout)

        records = parse_outdated_output(output)
        result = classify(records, notify=print_notice)

        try:
            table = render(result)
        except EmptyReportError as e:
            console.print(str(e))
            raise typer.Exit(2)  # Nothing to report

        console.print()
        console.print(table, markup=False, highlight=False)

    except typer.Exit:
        raise
    except Exception as e:
        print_error(str(e))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
