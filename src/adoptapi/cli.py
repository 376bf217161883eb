# src/adoptapi/cli.py

import argparse
import sys
from typing import Any, Dict, List, Optional

from adoptapi import log_utils
from adoptapi.config import load_config
from adoptapi.constants import REQUEST_TYPE_BINARY, REQUEST_TYPE_INFO
from adoptapi.exceptions import ConfigurationError
from adoptapi.releases import (
    ApiResponse,
    GithubReleaseProvider,
    ReleaseProvider,
    ReleaseQuery,
    ReleaseRequest,
    handle_request,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adoptapi",
        description="adoptapi - query OpenJDK binary releases",
    )
    parser.add_argument(
        "request_type",
        metavar="REQUEST_TYPE",
        help=f"'{REQUEST_TYPE_INFO}' for release metadata or '{REQUEST_TYPE_BINARY}' for a download link",
    )
    parser.add_argument(
        "build_type", metavar="BUILD_TYPE", help="Build type, e.g. releases or nightly"
    )
    parser.add_argument("version", metavar="VERSION", help="Version, e.g. openjdk8")
    parser.add_argument("--openjdk-impl", dest="openjdkImpl", help="e.g. hotspot")
    parser.add_argument("--os", dest="os", help="e.g. linux")
    parser.add_argument("--arch", dest="arch", help="e.g. x64")
    parser.add_argument("--type", dest="type", help="jdk or jre")
    parser.add_argument("--release", dest="release", help="Release name or 'latest'")
    parser.add_argument("--config", dest="config_path", help="Path to adoptapi.yaml")
    parser.add_argument("--log-level", dest="log_level", help="e.g. DEBUG")
    return parser


def _configure_logging(config: Dict[str, Any], log_level: Optional[str]) -> None:
    level = log_level or config.get("LOG_LEVEL")
    if level:
        log_utils.set_log_level(level)
    if config.get("LOG_DIR"):
        log_utils.add_file_logging(config["LOG_DIR"], level or "INFO")


def _emit(response: ApiResponse) -> int:
    """Print a response to stdout and return the process exit code."""
    if response.is_redirect:
        print(response.location)
    elif response.body:
        print(response.body)
    return 0 if 200 <= response.status < 400 else 1


def main(
    argv: Optional[List[str]] = None, provider: Optional[ReleaseProvider] = None
) -> int:
    """
    Entry point for the adoptapi command-line interface.

    Runs a single request through the same pipeline the API uses and prints the
    JSON body, the redirect target, or the error body.

    Returns:
        int: 0 for successful and redirect responses, 1 otherwise.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config_path)
    except ConfigurationError as error:
        log_utils.logger.error(f"Failed to load configuration: {error}")
        return 1

    _configure_logging(config, args.log_level)

    query = ReleaseQuery.from_params(vars(args))
    request = ReleaseRequest(
        request_type=args.request_type,
        build_type=args.build_type,
        version=args.version,
        query=query,
    )
    response = handle_request(request, provider or GithubReleaseProvider(config))
    if response.status >= 400:
        log_utils.logger.debug(f"Request failed with status {response.status}")
    return _emit(response)


if __name__ == "__main__":
    sys.exit(main())
