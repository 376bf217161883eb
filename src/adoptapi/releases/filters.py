"""
Release Query Filters

Narrow a normalized release list to what a query describes. Property filters
keep only matching binaries and drop releases left empty; the release filter
picks releases by name or the latest one. Every filter returns a new list and
leaves its input untouched.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Sequence, Tuple

from adoptapi.constants import LATEST_RELEASE_KEYWORD
from adoptapi.log_utils import logger

from .interfaces import NormalizedBinary, NormalizedRelease, ReleaseQuery

BinaryPredicate = Callable[[NormalizedBinary], bool]

# Query attribute -> NormalizedBinary attribute, in application order
BINARY_PROPERTY_FILTERS: Tuple[Tuple[str, str], ...] = (
    ("openjdk_impl", "openjdk_impl"),
    ("os", "os"),
    ("arch", "architecture"),
    ("binary_type", "binary_type"),
)

_MIN_DATETIME = datetime.min.replace(tzinfo=timezone.utc)


def _parse_iso_datetime_utc(value: Any) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp and normalize it to UTC.

    Returns:
        A timezone-aware datetime in UTC if parsing succeeds, `None` otherwise.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (ValueError, TypeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def filter_release_binaries(
    releases: Sequence[NormalizedRelease], predicate: BinaryPredicate
) -> List[NormalizedRelease]:
    """Keep binaries matching `predicate`; drop releases with none left."""
    filtered: List[NormalizedRelease] = []
    for release in releases:
        binaries = tuple(binary for binary in release.binaries if predicate(binary))
        if binaries:
            filtered.append(replace(release, binaries=binaries))
    return filtered


def filter_on_binary_property(
    releases: Sequence[NormalizedRelease],
    property_name: str,
    value: Optional[str],
) -> List[NormalizedRelease]:
    """
    Keep binaries whose `property_name` equals `value`, ignoring case.

    A `value` of None applies no filter.
    """
    if value is None:
        return list(releases)
    wanted = value.lower()

    def _matches(binary: NormalizedBinary) -> bool:
        return str(getattr(binary, property_name)).lower() == wanted

    filtered = filter_release_binaries(releases, _matches)
    logger.debug(
        "Filter %s=%s kept %d of %d releases",
        property_name,
        value,
        len(filtered),
        len(releases),
    )
    return filtered


def release_sort_key(release: NormalizedRelease) -> Tuple[datetime, str]:
    """Publication time, then release name; unparseable timestamps sort first."""
    published = _parse_iso_datetime_utc(release.timestamp) or _MIN_DATETIME
    return published, release.release_name


def filter_release(
    releases: Sequence[NormalizedRelease], release_name: Optional[str]
) -> List[NormalizedRelease]:
    """
    Select releases by name.

    - None returns every release.
    - "latest" returns the most recently published release (ties go to the
      lexicographically largest name), or an empty list.
    - Anything else returns the releases whose name matches, ignoring case.
    """
    if release_name is None:
        return list(releases)

    if release_name == LATEST_RELEASE_KEYWORD:
        if not releases:
            return []
        return [max(releases, key=release_sort_key)]

    wanted = release_name.lower()
    return [release for release in releases if release.release_name.lower() == wanted]


def apply_query(
    releases: Sequence[NormalizedRelease], query: ReleaseQuery
) -> List[NormalizedRelease]:
    """Apply every filter of `query`: binary properties first, release name last."""
    filtered = list(releases)
    for query_attr, binary_attr in BINARY_PROPERTY_FILTERS:
        filtered = filter_on_binary_property(
            filtered, binary_attr, getattr(query, query_attr)
        )
    return filter_release(filtered, query.release)
