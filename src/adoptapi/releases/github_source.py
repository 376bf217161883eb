"""
GitHub Release Provider

Fetches release lists from the GitHub releases API with caching, and converts
the raw JSON into UpstreamRelease records.
"""

import importlib.metadata
from typing import Any, Dict, List, Optional

import requests

from adoptapi.config import get_effective_github_token
from adoptapi.constants import (
    DEFAULT_GITHUB_ORGANISATION,
    GITHUB_API_BASE,
    GITHUB_API_TIMEOUT,
    GITHUB_MAX_PAGES,
    GITHUB_MAX_PER_PAGE,
    RELEASES_CACHE_EXPIRY_SECONDS,
    RELEASES_REPO_TEMPLATE,
)
from adoptapi.exceptions import UpstreamHTTPError, UpstreamInternalError
from adoptapi.log_utils import logger

from .cache import ReleaseCache
from .interfaces import ReleaseProvider, UpstreamAsset, UpstreamRelease


def get_user_agent() -> str:
    """Return `adoptapi/{version}`, with `unknown` when the package is not installed."""
    try:
        app_version = importlib.metadata.version("adoptapi")
    except importlib.metadata.PackageNotFoundError:
        app_version = "unknown"
    return f"adoptapi/{app_version}"


def upstream_release_from_github_data(
    release_data: Dict[str, Any],
) -> Optional[UpstreamRelease]:
    """
    Create an UpstreamRelease from GitHub API release data.

    Malformed assets are skipped with a warning; a release without a usable
    tag is skipped entirely.

    Parameters:
        release_data (Dict[str, Any]): Raw release data from GitHub API.

    Returns:
        Optional[UpstreamRelease]: The release, or None when the tag is missing.
    """
    tag_name = release_data.get("tag_name")
    if not isinstance(tag_name, str) or not tag_name.strip():
        logger.warning("Skipping release with missing or invalid tag_name")
        return None

    assets_data = release_data.get("assets")
    if not isinstance(assets_data, list):
        logger.warning("Release %s has an invalid assets field", tag_name)
        assets_data = []

    assets: List[UpstreamAsset] = []
    for asset_data in assets_data:
        if not isinstance(asset_data, dict):
            logger.warning("Skipping malformed asset for release %s", tag_name)
            continue
        asset_name = asset_data.get("name")
        download_url = asset_data.get("browser_download_url")
        if not isinstance(asset_name, str) or not asset_name.strip():
            logger.warning("Skipping asset with invalid name for release %s", tag_name)
            continue
        if not isinstance(download_url, str) or not download_url:
            logger.warning(
                "Skipping asset %s without download URL for release %s",
                asset_name,
                tag_name,
            )
            continue
        try:
            asset_size = int(asset_data.get("size"))
        except (TypeError, ValueError):
            logger.warning(
                "Skipping asset %s with invalid size for release %s",
                asset_name,
                tag_name,
            )
            continue
        assets.append(
            UpstreamAsset(name=asset_name, download_url=download_url, size=asset_size)
        )

    published_at = release_data.get("published_at")
    return UpstreamRelease(
        tag_name=tag_name,
        published_at=published_at if isinstance(published_at, str) else None,
        assets=tuple(assets),
    )


class GithubReleaseProvider(ReleaseProvider):
    """
    ReleaseProvider backed by the GitHub releases API.

    Each (version, build type) pair maps to one repository in the configured
    organisation. Responses are cached; when a refresh fails and an expired
    entry is available, the expired entry is served instead.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        cache: Optional[ReleaseCache] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Parameters:
            config (Optional[Dict[str, Any]]): Configuration mapping (tokens, organisation,
                timeout, cache expiry).
            cache (Optional[ReleaseCache]): Cache to use; one is created from the
                configured expiry when omitted.
            session (Optional[requests.Session]): HTTP session; module-level
                `requests.get` is used when omitted.
        """
        self.config = config or {}
        self.organisation = (
            self.config.get("GITHUB_ORGANISATION") or DEFAULT_GITHUB_ORGANISATION
        )
        self.timeout = self.config.get("GITHUB_API_TIMEOUT") or GITHUB_API_TIMEOUT
        self.cache = cache or ReleaseCache(
            self.config.get(
                "RELEASES_CACHE_EXPIRY_SECONDS", RELEASES_CACHE_EXPIRY_SECONDS
            )
        )
        self.session = session

    def releases_url(self, version: str, build_type: str) -> str:
        repo = RELEASES_REPO_TEMPLATE.format(version=version, build_type=build_type)
        return f"{GITHUB_API_BASE}/{self.organisation}/{repo}/releases"

    def fetch_releases(self, version: str, build_type: str) -> List[UpstreamRelease]:
        key = (version, build_type)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Using cached releases for %s/%s", version, build_type)
            return cached

        try:
            releases = self._fetch_from_api(self.releases_url(version, build_type))
        except (UpstreamHTTPError, UpstreamInternalError) as exc:
            stale = self.cache.get_stale(key)
            if stale is None:
                raise
            logger.warning(
                "Serving stale releases for %s/%s after fetch failure: %s",
                version,
                build_type,
                exc,
            )
            return stale

        self.cache.put(key, releases)
        logger.debug(
            "Cached %d releases for %s/%s (fetched from API)",
            len(releases),
            version,
            build_type,
        )
        return releases

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": get_user_agent(),
        }
        token = get_effective_github_token(
            self.config.get("GITHUB_TOKEN"),
            self.config.get("ALLOW_ENV_TOKEN", True),
        )
        if token:
            headers["Authorization"] = f"token {token}"
        return headers

    def _get(self, url: str, params: Optional[Dict[str, Any]]) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        return getter(url, params=params, headers=self._headers(), timeout=self.timeout)

    def _fetch_from_api(self, url: str) -> List[UpstreamRelease]:
        """
        Fetch every page of releases from `url`.

        Raises:
            UpstreamHTTPError: The API answered with an error status.
            UpstreamInternalError: Network failure or a malformed payload.
        """
        releases: List[UpstreamRelease] = []
        next_url: Optional[str] = url
        params: Optional[Dict[str, Any]] = {"per_page": GITHUB_MAX_PER_PAGE}
        pages = 0

        while next_url and pages < GITHUB_MAX_PAGES:
            logger.debug(f"Making GitHub API request: {next_url}")
            try:
                response = self._get(next_url, params)
                response.raise_for_status()
                payload = response.json()
            except requests.HTTPError as exc:
                if exc.response is None:
                    raise UpstreamInternalError(
                        "GitHub API request failed", url=next_url, details=str(exc)
                    ) from exc
                raise UpstreamHTTPError(
                    "GitHub API returned an error status",
                    status_code=exc.response.status_code,
                    url=next_url,
                ) from exc
            except (requests.RequestException, ValueError) as exc:
                raise UpstreamInternalError(
                    "GitHub API request failed", url=next_url, details=str(exc)
                ) from exc

            if not isinstance(payload, list):
                raise UpstreamInternalError(
                    "Invalid releases data received from GitHub API",
                    url=next_url,
                    details=f"expected a list, got {type(payload).__name__}",
                )

            for release_data in payload:
                if not isinstance(release_data, dict):
                    logger.warning(
                        "Skipping malformed release entry from %s: expected dict, got %s",
                        next_url,
                        type(release_data).__name__,
                    )
                    continue
                release = upstream_release_from_github_data(release_data)
                if release is not None:
                    releases.append(release)

            pages += 1
            # The next link already carries the query string
            next_url = (response.links or {}).get("next", {}).get("url")
            params = None

        if next_url:
            logger.warning(
                "Stopped after %d pages of releases from %s; remaining pages were not fetched",
                GITHUB_MAX_PAGES,
                url,
            )
        return releases
