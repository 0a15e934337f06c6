"""Summary table rendering."""

from .errors import EmptyReportError
from .models import ClassificationResult

LABEL_WIDTH = 8
COUNT_WIDTH = 5
PERCENT_WIDTH = 3
SEPARATOR = "-" * 22


def percentage(count: int, total: int) -> float:
    """Share of ``total`` as an unrounded percentage."""
    if total == 0:
        raise EmptyReportError()
    return count / total * 100


def _row(label: str, count: int, percent: float) -> str:
    return f"{label:>{LABEL_WIDTH}} | {count:>{COUNT_WIDTH}} | {percent:^{PERCENT_WIDTH}.0f}"


def render(result: ClassificationResult) -> str:
    """Render the outdated-package summary table.

    Args:
        result: Classification to summarize

    Returns:
        Table lines joined with newlines

    Raises:
        EmptyReportError: If the report held no packages
    """
    total = result.total_count
    if total == 0:
        raise EmptyReportError()

    lines = [
        f"{'':^{LABEL_WIDTH}} | {'count':^{COUNT_WIDTH}} | {'%':^{PERCENT_WIDTH}}",
        SEPARATOR,
        _row("major", result.major_count, percentage(result.major_count, total)),
        _row("minor", result.minor_count, percentage(result.minor_count, total)),
        _row("patch", result.patch_count, percentage(result.patch_count, total)),
        SEPARATOR,
        _row("overall", total, percentage(result.outdated_count, total)),
    ]
    return "\n".join(lines)
