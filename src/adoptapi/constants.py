"""
Constants and configuration values for adoptapi.

This module contains all hardcoded values, URLs, filename patterns, timeouts,
and other constants used throughout the application.
"""

# GitHub API URLs
GITHUB_API_BASE = "https://api.github.com/repos"
DEFAULT_GITHUB_ORGANISATION = "AdoptOpenJDK"
# One repository per (version, build type), e.g. openjdk8 + releases -> openjdk8-releases
RELEASES_REPO_TEMPLATE = "{version}-{build_type}"

# Network timeouts (in seconds)
GITHUB_API_TIMEOUT = 10
GITHUB_MAX_PER_PAGE = 100
# Upper bound on followed pagination links for a single fetch
GITHUB_MAX_PAGES = 20

# Cache configuration
RELEASES_CACHE_EXPIRY_SECONDS = 300

# Request types understood by the response layer
REQUEST_TYPE_INFO = "info"
REQUEST_TYPE_BINARY = "binary"
LATEST_RELEASE_KEYWORD = "latest"

# Binary kinds
BINARY_TYPE_JDK = "jdk"
BINARY_TYPE_JRE = "jre"

# Implementation recorded for assets whose name does not carry one
DEFAULT_OPENJDK_IMPL = "hotspot"

# Checksum companion assets
CHECKSUM_FILE_SUFFIX = "sha256.txt"
CHECKSUM_LINK_SUFFIX = ".sha256.txt"

# Asset filename conventions, searched (not anchored) in priority order
CURRENT_TIMESTAMP_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}-[0-9]{2}-[0-9]{2}"
LEGACY_TIMESTAMP_PATTERN = r"[0-9]{12}"
ARCHIVE_EXTENSION_PATTERN = r"(tar\.gz|zip)"

# OpenJDK8U-jre_x64_linux_hotspot_2018-09-28-10-42.tar.gz
CURRENT_FILENAME_PATTERN = (
    r"OpenJDK([0-9]*)U?(-jre)?_([0-9a-zA-Z]+)_([0-9a-zA-Z]+)_([0-9a-zA-Z]+)"
    r".*_(" + CURRENT_TIMESTAMP_PATTERN + r")\." + ARCHIVE_EXTENSION_PATTERN
)
# OpenJDK9-OPENJ9_x64_Linux_201802091733.tar.gz
LEGACY_FILENAME_PATTERN = (
    r"OpenJDK([0-9]+)U?(-[0-9a-zA-Z]+)?_([0-9a-zA-Z]+)_([0-9a-zA-Z]+)"
    r".*_(" + LEGACY_TIMESTAMP_PATTERN + r")\." + ARCHIVE_EXTENSION_PATTERN
)
# OpenJDK-AMBER_x64_Linux_201808241450.tar.gz
EARLY_ACCESS_FILENAME_PATTERN = (
    r"OpenJDK-AMBER_([0-9a-zA-Z]+)_([0-9a-zA-Z]+)_("
    + LEGACY_TIMESTAMP_PATTERN
    + r")\."
    + ARCHIVE_EXTENSION_PATTERN
)
# jdk-11+28, jdk-amber-...
EARLY_ACCESS_TAG_VERSION_PATTERN = r"jdk-([0-9]+)"
# jdk8u-2020-01-01, jdk-11.0.1+13
TAG_MAJOR_VERSION_PATTERN = r"jdk-?([0-9]+)"

# Response bodies
MSG_NOT_FOUND = "Not found"
MSG_INTERNAL_ERROR = "Internal error"
MSG_MULTIPLE_BINARIES = "Multiple binaries match request: "
JSON_INDENT = 2

# Logging configuration
LOGGER_NAME = "adoptapi"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_NAME = "adoptapi.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5

# Configuration file names
APP_NAME = "adoptapi"
CONFIG_FILE_NAME = "adoptapi.yaml"

# Environment variable names
LOG_LEVEL_ENV_VAR = "ADOPTAPI_LOG_LEVEL"
GITHUB_TOKEN_ENV_VAR = "GITHUB_TOKEN"
