"""Exceptions raised by DepDrift."""


class DepDriftError(Exception):
    """Base class for DepDrift errors."""


class VersionParseError(DepDriftError):
    """A version string is not a valid semantic version."""

    def __init__(self, version: str, message: str):
        super().__init__(message)
        self.version = version
        self.message = message


class EmptyReportError(DepDriftError):
    """The dependency report contains no packages."""

    def __init__(self, message: str = "No packages found in dependency report"):
        super().__init__(message)


class ReportFormatError(DepDriftError):
    """The dependency report could not be decoded."""


class YarnError(DepDriftError):
    """Yarn could not be run."""
