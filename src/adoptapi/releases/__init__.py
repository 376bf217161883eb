"""
adoptapi Release Subsystem

Turns upstream release listings into a normalized, queryable view and resolves
client requests against it.

Core Components:
- interfaces: Data records and the release provider interface
- filenames: Asset filename conventions
- normalizer: Upstream release to canonical schema conversion
- filters: Query filters
- responses: Outward response resolution
- handler: Per-request entry point
- github_source: GitHub-backed release provider
- cache: Release list cache
"""

from .filenames import FILENAME_STRATEGIES, FilenameStrategy, parse_filename
from .filters import apply_query, filter_on_binary_property, filter_release
from .github_source import GithubReleaseProvider, upstream_release_from_github_data
from .handler import handle_request
from .interfaces import (
    ApiResponse,
    NormalizedBinary,
    NormalizedRelease,
    ParsedFilename,
    ReleaseProvider,
    ReleaseQuery,
    ReleaseRequest,
    UpstreamAsset,
    UpstreamRelease,
)
from .normalizer import normalize_releases
from .responses import resolve_response

__all__ = [
    "ApiResponse",
    "FILENAME_STRATEGIES",
    "FilenameStrategy",
    "GithubReleaseProvider",
    "NormalizedBinary",
    "NormalizedRelease",
    "ParsedFilename",
    "ReleaseProvider",
    "ReleaseQuery",
    "ReleaseRequest",
    "UpstreamAsset",
    "UpstreamRelease",
    "apply_query",
    "filter_on_binary_property",
    "filter_release",
    "handle_request",
    "normalize_releases",
    "parse_filename",
    "resolve_response",
    "upstream_release_from_github_data",
]
