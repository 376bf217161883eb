"""
Release Normalization

Converts upstream release records into the canonical Release/Binary schema.
Pure functions: no I/O and no shared state.
"""

from typing import Any, Dict, Iterable, List, Optional

from adoptapi.constants import CHECKSUM_FILE_SUFFIX, CHECKSUM_LINK_SUFFIX
from adoptapi.log_utils import logger

from .filenames import parse_filename
from .interfaces import (
    NormalizedBinary,
    NormalizedRelease,
    UpstreamAsset,
    UpstreamRelease,
)


def is_checksum_asset(asset: UpstreamAsset) -> bool:
    """Return True for checksum companion files such as `*.sha256.txt`."""
    return asset.name.endswith(CHECKSUM_FILE_SUFFIX)


def normalize_binary(
    asset: UpstreamAsset, release: UpstreamRelease
) -> Optional[NormalizedBinary]:
    """
    Build the canonical binary record for an asset.

    Returns:
        Optional[NormalizedBinary]: The binary, or None when the filename follows
            no known convention.
    """
    parsed = parse_filename(asset.name, release.tag_name)
    if parsed is None:
        return None

    return NormalizedBinary(
        os=parsed.os.lower(),
        architecture=parsed.arch.lower(),
        binary_type=parsed.binary_type,
        openjdk_impl=parsed.openjdk_impl.lower(),
        binary_name=asset.name,
        binary_link=asset.download_url,
        binary_size=asset.size,
        checksum_link=asset.download_url + CHECKSUM_LINK_SUFFIX,
        version=parsed.version,
    )


def normalize_release(release: UpstreamRelease) -> NormalizedRelease:
    """Normalize one release; the result may have no binaries."""
    binaries = []
    for asset in release.assets:
        if is_checksum_asset(asset):
            continue
        binary = normalize_binary(asset, release)
        if binary is None:
            logger.debug(
                "Skipping unrecognised asset %s in release %s",
                asset.name,
                release.tag_name,
            )
            continue
        binaries.append(binary)

    return NormalizedRelease(
        release_name=release.tag_name,
        timestamp=release.published_at,
        binaries=tuple(binaries),
    )


def normalize_releases(releases: Iterable[UpstreamRelease]) -> List[NormalizedRelease]:
    """
    Normalize upstream releases, dropping those left without any binary.

    Release order is preserved.
    """
    normalized: List[NormalizedRelease] = []
    for release in releases:
        candidate = normalize_release(release)
        if not candidate.binaries:
            logger.debug("Dropping release %s with no binaries", release.tag_name)
            continue
        normalized.append(candidate)
    return normalized


def releases_to_dicts(releases: Iterable[NormalizedRelease]) -> List[Dict[str, Any]]:
    """Serialize normalized releases with their wire field names."""
    return [release.to_dict() for release in releases]
