"""
Response Resolution

Turns a filtered release list into the outward response for a request type.
"""

import json
from typing import Any, Sequence

from adoptapi.constants import (
    JSON_INDENT,
    MSG_MULTIPLE_BINARIES,
    REQUEST_TYPE_BINARY,
    REQUEST_TYPE_INFO,
)
from adoptapi.log_utils import logger

from .interfaces import ApiResponse, NormalizedRelease
from .normalizer import releases_to_dicts


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT)


def send_data(releases: Sequence[NormalizedRelease]) -> ApiResponse:
    """Structured response: the releases as pretty-printed JSON, or 404 if empty."""
    if not releases:
        return ApiResponse.not_found()
    return ApiResponse(
        status=200, body=_to_json(releases_to_dicts(releases))
    )


def redirect_to_binary(releases: Sequence[NormalizedRelease]) -> ApiResponse:
    """
    Redirect to the single binary selected by the filters.

    - no release: 404
    - several releases: 400 listing the releases
    - one release with several binaries: 400 listing its binaries
    - one release with one binary: 302 to the binary's download link
    """
    if not releases:
        return ApiResponse.not_found()

    if len(releases) > 1:
        return ApiResponse(
            status=400,
            body=MSG_MULTIPLE_BINARIES
            + _to_json(releases_to_dicts(releases)),
        )

    release = releases[0]
    if not release.binaries:
        return ApiResponse.not_found()
    if len(release.binaries) > 1:
        return ApiResponse(
            status=400,
            body=MSG_MULTIPLE_BINARIES
            + _to_json([binary.to_dict() for binary in release.binaries]),
        )

    binary_link = release.binaries[0].binary_link
    logger.info(f"Redirecting to {binary_link}")
    return ApiResponse(status=302, location=binary_link)


def resolve_response(
    request_type: str, releases: Sequence[NormalizedRelease]
) -> ApiResponse:
    """Dispatch on request type; unknown request types are 404."""
    if request_type == REQUEST_TYPE_INFO:
        return send_data(releases)
    if request_type == REQUEST_TYPE_BINARY:
        return redirect_to_binary(releases)
    return ApiResponse.not_found()
