"""
Asset Filename Parsing

Release assets have been named by several conventions over the life of the
project. Each convention is a FilenameStrategy; parse_filename() tries them in
priority order and returns the first match, or None when the asset is not a
recognised binary archive (checksums, signatures, source bundles, ...).

Extracted values keep the case used in the filename.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from adoptapi.constants import (
    BINARY_TYPE_JDK,
    BINARY_TYPE_JRE,
    CURRENT_FILENAME_PATTERN,
    DEFAULT_OPENJDK_IMPL,
    EARLY_ACCESS_FILENAME_PATTERN,
    EARLY_ACCESS_TAG_VERSION_PATTERN,
    LEGACY_FILENAME_PATTERN,
    TAG_MAJOR_VERSION_PATTERN,
)

from .interfaces import ParsedFilename


class FilenameStrategy(ABC):
    """One naming convention for release asset filenames."""

    name: str = ""

    @abstractmethod
    def parse(self, filename: str, tag_name: str = "") -> Optional[ParsedFilename]:
        """
        Decode a filename using this convention.

        Parameters:
            filename (str): Asset filename.
            tag_name (str): Tag of the release the asset belongs to.

        Returns:
            Optional[ParsedFilename]: Fully populated attributes, or None if the
                filename does not follow this convention.
        """


class CurrentFilenameStrategy(FilenameStrategy):
    """
    OpenJDK8U-jre_x64_linux_hotspot_2018-09-28-10-42.tar.gz

    Version, optional `U`, optional `-jre`, arch, os, implementation, then a
    dash-separated timestamp. Names without version digits take the major
    version from the release tag.
    """

    name = "current"
    _RX = re.compile(CURRENT_FILENAME_PATTERN)
    _TAG_RX = re.compile(TAG_MAJOR_VERSION_PATTERN)

    def parse(self, filename: str, tag_name: str = "") -> Optional[ParsedFilename]:
        matched = self._RX.search(filename)
        if matched is None:
            return None

        version = matched.group(1)
        if not version:
            tag_match = self._TAG_RX.search(tag_name or "")
            if tag_match is None:
                return None
            version = tag_match.group(1)

        return ParsedFilename(
            version=version,
            binary_type=BINARY_TYPE_JRE if matched.group(2) else BINARY_TYPE_JDK,
            arch=matched.group(3),
            os=matched.group(4),
            openjdk_impl=matched.group(5),
            timestamp=matched.group(6),
            extension=matched.group(7),
        )


class LegacyFilenameStrategy(FilenameStrategy):
    """
    OpenJDK9-OPENJ9_x64_Linux_201802091733.tar.gz

    Always a JDK. The implementation follows the version as `-NAME`; without
    it the default implementation is assumed.
    """

    name = "legacy"
    _RX = re.compile(LEGACY_FILENAME_PATTERN)

    def parse(self, filename: str, tag_name: str = "") -> Optional[ParsedFilename]:
        matched = self._RX.search(filename)
        if matched is None:
            return None

        openjdk_impl = DEFAULT_OPENJDK_IMPL
        if matched.group(2):
            openjdk_impl = matched.group(2).replace("-", "")

        return ParsedFilename(
            version=matched.group(1),
            binary_type=BINARY_TYPE_JDK,
            arch=matched.group(3),
            os=matched.group(4),
            openjdk_impl=openjdk_impl,
            timestamp=matched.group(5),
            extension=matched.group(6),
        )


class EarlyAccessFilenameStrategy(FilenameStrategy):
    """
    OpenJDK-AMBER_x64_Linux_201808241450.tar.gz

    Only arch, os and timestamp are in the filename; the version comes from a
    `jdk-<major>...` release tag.
    """

    name = "early-access"
    _RX = re.compile(EARLY_ACCESS_FILENAME_PATTERN)
    _TAG_RX = re.compile(EARLY_ACCESS_TAG_VERSION_PATTERN)

    def parse(self, filename: str, tag_name: str = "") -> Optional[ParsedFilename]:
        matched = self._RX.search(filename)
        if matched is None:
            return None

        version_match = self._TAG_RX.search(tag_name or "")
        if version_match is None:
            return None

        return ParsedFilename(
            version=version_match.group(1),
            binary_type=BINARY_TYPE_JDK,
            arch=matched.group(1),
            os=matched.group(2),
            openjdk_impl=DEFAULT_OPENJDK_IMPL,
            timestamp=matched.group(3),
            extension=matched.group(4),
        )


# Priority order: first match wins
FILENAME_STRATEGIES: Sequence[FilenameStrategy] = (
    CurrentFilenameStrategy(),
    LegacyFilenameStrategy(),
    EarlyAccessFilenameStrategy(),
)


def parse_filename(
    filename: str,
    tag_name: str = "",
    strategies: Sequence[FilenameStrategy] = FILENAME_STRATEGIES,
) -> Optional[ParsedFilename]:
    """
    Decode an asset filename with the first convention that recognises it.

    Parameters:
        filename (str): Asset filename.
        tag_name (str): Tag of the release the asset belongs to; needed by
            conventions that do not carry the version in the filename.
        strategies (Sequence[FilenameStrategy]): Conventions to try, in order.

    Returns:
        Optional[ParsedFilename]: The parsed attributes, or None when no convention
            matches. Not matching is expected for non-binary assets.
    """
    if not isinstance(filename, str) or not filename:
        return None

    for strategy in strategies:
        parsed = strategy.parse(filename, tag_name)
        if parsed is not None:
            return parsed
    return None
