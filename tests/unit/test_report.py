"""Tests for summary table rendering."""

import pytest

from depdrift.classify import classify
from depdrift.errors import EmptyReportError
from depdrift.models import ClassificationResult
from depdrift.report import percentage, render


class TestRender:
    """Test table rendering."""

    def test_render_sample_report(self, sample_records):
        """Should render counts and rounded percentages per bucket."""
        table = render(classify(sample_records))

        assert table.splitlines() == [
            "         | count |  % ",
            "----------------------",
            "   major |     1 | 25 ",
            "   minor |     0 |  0 ",
            "   patch |     1 | 25 ",
            "----------------------",
            " overall |     4 | 50 ",
        ]

    def test_render_rounds_to_whole_numbers(self):
        """Should round unrounded percentages only when formatting."""
        result = ClassificationResult(
            outdated_major=["a"],
            outdated_minor=["b", "c"],
            outdated_patch=[],
            total_count=3,
        )
        lines = render(result).splitlines()

        assert lines[2] == "   major |     1 | 33 "
        assert lines[3] == "   minor |     2 | 67 "
        assert lines[6] == " overall |     3 | 100"

    def test_overall_counts_unclassified(self):
        """Should show total_count, not the number of outdated packages."""
        result = ClassificationResult(outdated_patch=["a"], total_count=10)
        lines = render(result).splitlines()

        assert lines[4] == "   patch |     1 | 10 "
        assert lines[6] == " overall |    10 | 10 "

    def test_separator_width(self, sample_records):
        """Should draw separators 22 dashes wide."""
        lines = render(classify(sample_records)).splitlines()
        assert lines[1] == "-" * 22
        assert lines[5] == "-" * 22

    def test_render_is_idempotent(self, sample_records):
        """Should produce identical output for identical input."""
        first = render(classify(sample_records))
        second = render(classify(sample_records))
        assert first == second

    def test_render_empty_report(self):
        """Should refuse to render a report with no packages."""
        with pytest.raises(EmptyReportError) as exc_info:
            render(ClassificationResult())
        assert "no packages" in str(exc_info.value).lower()


class TestPercentage:
    """Test percentage computation."""

    def test_percentage_is_unrounded(self):
        """Should return the exact share."""
        assert percentage(1, 3) == pytest.approx(33.3333, rel=1e-4)
        assert percentage(2, 8) == 25.0

    def test_percentage_of_zero_total(self):
        """Should signal an empty report instead of dividing by zero."""
        with pytest.raises(EmptyReportError):
            percentage(0, 0)
