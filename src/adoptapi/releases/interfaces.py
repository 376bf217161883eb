"""
Core Interfaces for the adoptapi release subsystem

This module defines the data structures passed between the filename parser,
the normalizer, the query filters and the response layer, together with the
interface of the upstream release provider.

All records are immutable and request-scoped.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from adoptapi.constants import MSG_NOT_FOUND


@dataclass(frozen=True)
class UpstreamAsset:
    """A downloadable file attached to an upstream release."""

    name: str
    """The filename of the asset"""

    download_url: str
    """Direct URL to download the asset"""

    size: int
    """File size in bytes"""


@dataclass(frozen=True)
class UpstreamRelease:
    """A release as published by the source-control host."""

    tag_name: str
    """The release tag (e.g., 'jdk8u181-b13')"""

    published_at: Optional[str] = None
    """ISO 8601 timestamp when the release was published"""

    assets: Tuple[UpstreamAsset, ...] = ()
    """Assets in the order the host lists them"""


@dataclass(frozen=True)
class ParsedFilename:
    """Attributes decoded from a single asset filename."""

    version: str
    binary_type: str
    arch: str
    os: str
    openjdk_impl: str
    timestamp: str
    extension: str


@dataclass(frozen=True)
class NormalizedBinary:
    """A binary in the canonical schema served to clients."""

    os: str
    architecture: str
    binary_type: str
    openjdk_impl: str
    binary_name: str
    binary_link: str
    binary_size: int
    checksum_link: str
    version: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "os": self.os,
            "architecture": self.architecture,
            "binaryType": self.binary_type,
            "openjdk_impl": self.openjdk_impl,
            "binary_name": self.binary_name,
            "binary_link": self.binary_link,
            "binary_size": self.binary_size,
            "checksum_link": self.checksum_link,
            "version": self.version,
        }


@dataclass(frozen=True)
class NormalizedRelease:
    """A release in the canonical schema; always carries at least one binary."""

    release_name: str
    timestamp: Optional[str]
    binaries: Tuple[NormalizedBinary, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "release_name": self.release_name,
            "timestamp": self.timestamp,
            "binaries": [binary.to_dict() for binary in self.binaries],
        }


@dataclass(frozen=True)
class ReleaseQuery:
    """Optional criteria narrowing a release list; None means "not filtered"."""

    openjdk_impl: Optional[str] = None
    os: Optional[str] = None
    arch: Optional[str] = None
    binary_type: Optional[str] = None
    release: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ReleaseQuery":
        """
        Build a query from request query-string parameters.

        Reads `openjdkImpl`, `os`, `arch`, `type` and `release`. Only a missing
        (or None) value leaves the corresponding filter unapplied; an empty string
        is compared like any other value.
        """

        def _get(key: str) -> Optional[str]:
            value = params.get(key)
            return None if value is None else str(value)

        return cls(
            openjdk_impl=_get("openjdkImpl"),
            os=_get("os"),
            arch=_get("arch"),
            binary_type=_get("type"),
            release=_get("release"),
        )


@dataclass(frozen=True)
class ReleaseRequest:
    """A single API request after routing has extracted its path segments."""

    request_type: Optional[str]
    """'info' or 'binary'"""

    build_type: Optional[str]
    """Variant family, e.g. 'releases' or 'nightly'"""

    version: Optional[str]
    """Distribution version, e.g. 'openjdk8'"""

    query: ReleaseQuery = field(default_factory=ReleaseQuery)


@dataclass(frozen=True)
class ApiResponse:
    """Outward response: status code, body and an optional redirect target."""

    status: int
    body: str = ""
    location: Optional[str] = None

    @property
    def is_redirect(self) -> bool:
        return self.location is not None

    @classmethod
    def not_found(cls) -> "ApiResponse":
        return cls(status=404, body=MSG_NOT_FOUND)


class ReleaseProvider(ABC):
    """
    Source of upstream release lists.

    Implementations may cache and may serve stale data. They signal failure by
    raising UpstreamInternalError or UpstreamHTTPError.
    """

    @abstractmethod
    def fetch_releases(self, version: str, build_type: str) -> List[UpstreamRelease]:
        """
        Return the upstream releases for a version and build type.

        Parameters:
            version (str): Distribution version path segment (e.g. "openjdk8").
            build_type (str): Build type path segment (e.g. "releases").

        Returns:
            List[UpstreamRelease]: Releases in the order the host lists them.
        """
