"""Semantic version validation, comparison and ordering."""

import re
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Tuple

from schema_docs.schemas import SchemaVersion, VersionCheck, VersionStatus

# major.minor.patch only; no pre-release or build metadata
SEMVER_PATTERN = re.compile(r"\d+\.\d+\.\d+", re.ASCII)

VERSION_COMPONENTS = 3


def is_valid_semver(version: object) -> bool:
    """Return True if version is a plain ``major.minor.patch`` string."""
    if not isinstance(version, str):
        return False
    return SEMVER_PATTERN.fullmatch(version) is not None


def check_version(version: Any) -> VersionCheck:
    """
    Check a raw version value taken from a schema file.

    Args:
        version: The file's ``version`` value; missing or null reads as None

    Returns:
        VersionCheck tagged VALID, or REJECTED with the reason
    """
    text = None if version is None else str(version)
    if is_valid_semver(version):
        return VersionCheck(version=text, status=VersionStatus.VALID)
    if version is None:
        reason = "version is missing"
    else:
        reason = f"version {version!r} is not in major.minor.patch form"
    return VersionCheck(version=text, status=VersionStatus.REJECTED, reason=reason)


def version_key(version: str) -> Tuple[int, ...]:
    """Numeric components of a version, missing components read as 0."""
    parts = [int(part) for part in version.split(".") if part]
    parts.extend([0] * (VERSION_COMPONENTS - len(parts)))
    return tuple(parts[:VERSION_COMPONENTS])


def compare_versions(a: str, b: str) -> int:
    """
    Compare two version strings component by component.

    Returns:
        1 if a > b, -1 if a < b, 0 if equal
    """
    key_a, key_b = version_key(a), version_key(b)
    if key_a > key_b:
        return 1
    if key_a < key_b:
        return -1
    return 0


def sort_descending(records: Iterable[SchemaVersion]) -> List[SchemaVersion]:
    """Sort records newest first. Equal versions keep their input order."""
    return sorted(
        records,
        key=cmp_to_key(lambda x, y: compare_versions(y.version, x.version)),
    )


def select_latest(records: Iterable[SchemaVersion]) -> Optional[SchemaVersion]:
    """Return the record with the highest version; the first one wins ties."""
    latest: Optional[SchemaVersion] = None
    for record in records:
        if latest is None or compare_versions(record.version, latest.version) > 0:
            latest = record
    return latest
