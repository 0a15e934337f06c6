"""Classification of dependencies by semantic version drift."""

from collections.abc import Callable, Sequence

import semver

from .errors import VersionParseError
from .models import Bucket, ClassificationResult, PackageRecord

Notify = Callable[[str], None]


def parse_version(text: str) -> semver.Version:
    """Parse a strict SemVer 2.0.0 version string.

    Args:
        text: Version string such as "1.2.3" or "2.0.0-rc.1"

    Returns:
        Parsed version

    Raises:
        VersionParseError: If the string is not valid SemVer
    """
    try:
        return semver.Version.parse(text)
    except (ValueError, TypeError) as e:
        raise VersionParseError(text, str(e)) from e


def classify_record(record: PackageRecord) -> Bucket | None:
    """Find the most significant version component that differs.

    Args:
        record: Package to classify

    Returns:
        The drift bucket, or None when major, minor and patch are all equal

    Raises:
        VersionParseError: If either version is not valid SemVer
    """
    return _compare(
        parse_version(record.current_version),
        parse_version(record.latest_version),
    )


def _compare(current: semver.Version, latest: semver.Version) -> Bucket | None:
    if current.major != latest.major:
        return Bucket.MAJOR
    if current.minor != latest.minor:
        return Bucket.MINOR
    if current.patch != latest.patch:
        return Bucket.PATCH
    return None


def classify(records: Sequence[PackageRecord], notify: Notify | None = None) -> ClassificationResult:
    """Bucket outdated packages by the severity of their drift.

    Up-to-date and unparseable packages are reported through ``notify`` and
    left out of every bucket. They still count towards ``total_count``.

    Args:
        records: Packages in report order
        notify: Called with one line per skipped package

    Returns:
        Classification of all records
    """
    if notify is None:
        notify = _discard

    buckets: dict[Bucket, list[str]] = {bucket: [] for bucket in Bucket}

    for record in records:
        name = record.name
        if record.current_version == record.latest_version:
            notify(f"Package {name} is up-to-date. Skipping...")
            continue

        try:
            current = parse_version(record.current_version)
        except VersionParseError as e:
            notify(f"Error parsing current version for package {name}: {e}")
            continue

        try:
            latest = parse_version(record.latest_version)
        except VersionParseError as e:
            notify(f"Error parsing latest version for package {name}: {e}")
            continue

        bucket = _compare(current, latest)
        # Semantically equal versions, e.g. differing only in build metadata,
        # fall through here without a notice.
        if bucket is not None:
            buckets[bucket].append(name)

    return ClassificationResult(
        outdated_major=tuple(buckets[Bucket.MAJOR]),
        outdated_minor=tuple(buckets[Bucket.MINOR]),
        outdated_patch=tuple(buckets[Bucket.PATCH]),
        total_count=len(records),
    )


def _discard(line: str) -> None:
    pass
