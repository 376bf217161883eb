"""
Request Handling

Entry point for one API request: fetch upstream releases through the given
provider, normalize, filter and resolve the outward response. Upstream
failures are translated here and nowhere else.
"""

from adoptapi.constants import MSG_INTERNAL_ERROR
from adoptapi.exceptions import UpstreamHTTPError, UpstreamInternalError
from adoptapi.log_utils import logger

from .filters import apply_query
from .interfaces import ApiResponse, ReleaseProvider, ReleaseRequest
from .normalizer import normalize_releases
from .responses import resolve_response


def handle_request(request: ReleaseRequest, provider: ReleaseProvider) -> ApiResponse:
    """
    Serve a release request.

    Parameters:
        request (ReleaseRequest): Path segments and query criteria.
        provider (ReleaseProvider): Source of upstream releases.

    Returns:
        ApiResponse: 200 with JSON, 302 redirect, 400 when a binary request is
            ambiguous, 404 when nothing matches or a path segment is missing,
            500 on internal upstream failures, or the upstream status with an
            empty body when the upstream API rejected the request.
    """
    if not request.request_type or not request.build_type or not request.version:
        return ApiResponse.not_found()

    try:
        upstream = provider.fetch_releases(request.version, request.build_type)
    except UpstreamHTTPError as exc:
        logger.warning(
            f"Upstream returned {exc.status_code} for {request.version}/{request.build_type}"
        )
        return ApiResponse(status=exc.status_code, body="")
    except UpstreamInternalError as exc:
        logger.error(
            f"Failed to fetch releases for {request.version}/{request.build_type}: {exc}"
        )
        return ApiResponse(status=500, body=MSG_INTERNAL_ERROR)
    except Exception:
        logger.exception(
            f"Unexpected error fetching releases for {request.version}/{request.build_type}"
        )
        return ApiResponse(status=500, body=MSG_INTERNAL_ERROR)

    releases = apply_query(normalize_releases(upstream), request.query)
    return resolve_response(request.request_type, releases)
