from labeler.services.github_client import GitHubClient
from labeler.services.triage import label_issue, version_label_for_body
from labeler.services.versions import (
    MalformedVersionError,
    SuffixKind,
    classify_suffix,
    extract_version_from_body,
    label_from_version,
)

__all__ = [
    "classify_suffix",
    "extract_version_from_body",
    "GitHubClient",
    "label_from_version",
    "label_issue",
    "MalformedVersionError",
    "SuffixKind",
    "version_label_for_body",
]
