# labeler/services/triage.py
"""Version triage for GitHub issues."""

import logging

from labeler.services.github_client import GitHubClient
from labeler.services.versions import extract_version_from_body, label_from_version

logger = logging.getLogger(__name__)


def version_label_for_body(body: str) -> str | None:
    """Return the version label for an issue body, or None without a Server report."""
    match = extract_version_from_body(body)
    if match is None:
        return None
    return label_from_version(match.version, match.suffix)


def label_issue(client: GitHubClient, number: int, dry_run: bool = False) -> str | None:
    """
    Compute the version label for an issue and apply it.

    Args:
        client: GitHubClient for the issue's repository
        number: Issue number
        dry_run: Compute the label without applying it

    Returns:
        The label applied (or that would be applied), or None if the issue
        has no Server version report or the label does not exist in the repository
    """
    body = client.get_issue_body(number)
    label = version_label_for_body(body)
    if label is None:
        logger.info(f"No server version found in #{number}")
        return None

    if label not in client.get_valid_labels():
        logger.warning(f"Label {label} does not exist in {client.repo_name}, skipping #{number}")
        return None

    if dry_run:
        logger.info(f"Dry run: would label #{number} with {label}")
    else:
        client.add_label(number, label)
    return label
