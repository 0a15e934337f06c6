"""Core data models for DepDrift."""

from dataclasses import dataclass, field
from enum import Enum

from .errors import ReportFormatError


class Bucket(str, Enum):
    """Severity of the drift between a current and a latest version."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


@dataclass(frozen=True)
class PackageRecord:
    """A single dependency as reported by the package manager."""

    name: str
    current_version: str
    latest_version: str

    @classmethod
    def from_row(cls, row: list[str]) -> "PackageRecord":
        """Build a record from a yarn table row.

        Rows are positional: name, current, wanted, latest, ...
        """
        if len(row) < 4:
            raise ReportFormatError(f"Expected at least 4 columns, got {len(row)}: {row!r}")
        return cls(name=row[0], current_version=row[1], latest_version=row[3])


@dataclass(frozen=True)
class ClassificationResult:
    """Outdated packages bucketed by drift severity."""

    outdated_major: tuple[str, ...] = field(default_factory=tuple)
    outdated_minor: tuple[str, ...] = field(default_factory=tuple)
    outdated_patch: tuple[str, ...] = field(default_factory=tuple)
    total_count: int = 0  # every input record, classified or not

    def __post_init__(self):
        for name in ("outdated_major", "outdated_minor", "outdated_patch"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def major_count(self) -> int:
        return len(self.outdated_major)

    @property
    def minor_count(self) -> int:
        return len(self.outdated_minor)

    @property
    def patch_count(self) -> int:
        return len(self.outdated_patch)

    @property
    def outdated_count(self) -> int:
        return self.major_count + self.minor_count + self.patch_count
