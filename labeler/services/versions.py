# labeler/services/versions.py
"""Server version extraction and version label policy."""

import re
from enum import Enum

from labeler.models.version_match import VersionMatch

LABEL_PREFIX = "version/"
UNSUPPORTED_LABEL = LABEL_PREFIX + "unsupported"
MASTER_LABEL = LABEL_PREFIX + "master"

# "Server:" line, then the "Version:" line directly below it
SERVER_VERSION_PATTERN = re.compile(
    r"Server:[ \t]*\r?\n[ \t]*Version:[ \t]+(\d+\.\d+\.\d+)(?:-([\w.\-]+))?",
    re.ASCII,
)

DEVELOPMENT_MARKER = "dev"
EDITION_PATTERN = re.compile(r"ce|cs\d+|rc\d+", re.ASCII)


class MalformedVersionError(ValueError):
    """Raised when a version string has fewer than two components."""


class SuffixKind(Enum):
    """Triage category of a version suffix."""

    RELEASE = "release"
    EDITION = "edition"
    DEVELOPMENT = "development"
    UNSUPPORTED = "unsupported"


def extract_version_from_body(body: str) -> VersionMatch | None:
    """
    Find the last Server version report in an issue body.

    Args:
        body: Raw issue text, typically containing `docker version` output

    Returns:
        VersionMatch with the verbatim matched text, the numeric version and
        the suffix, or None if the body has no Server version report
    """
    last: re.Match[str] | None = None
    for match in SERVER_VERSION_PATTERN.finditer(body):
        last = match

    if last is None:
        return None
    return VersionMatch(last.group(0), last.group(1), last.group(2) or "")


def classify_suffix(suffix: str) -> SuffixKind:
    """Classify a version suffix. Anything unrecognized is unsupported."""
    if not suffix:
        return SuffixKind.RELEASE

    tokens = suffix.split("-")
    if tokens[0] == DEVELOPMENT_MARKER:
        return SuffixKind.DEVELOPMENT
    if all(EDITION_PATTERN.fullmatch(token) for token in tokens):
        return SuffixKind.EDITION
    return SuffixKind.UNSUPPORTED


def label_from_version(version: str, suffix: str) -> str:
    """
    Map a version and suffix to a triage label.

    Args:
        version: Dotted numeric version, e.g. "17.03.0"
        suffix: Text after the first hyphen, e.g. "ce-rc1", or ""

    Returns:
        "version/unsupported", "version/master" or "version/<MAJOR>.<MINOR>"

    Raises:
        MalformedVersionError: If version has fewer than two components
    """
    parts = version.split(".")
    if len(parts) < 2 or not all(parts[:2]):
        raise MalformedVersionError(f"Malformed version: {version!r}")

    kind = classify_suffix(suffix)
    if kind is SuffixKind.UNSUPPORTED:
        return UNSUPPORTED_LABEL
    if kind is SuffixKind.DEVELOPMENT:
        return MASTER_LABEL
    return f"{LABEL_PREFIX}{parts[0]}.{parts[1]}"
