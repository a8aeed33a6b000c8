# labeler/services/github_client.py
"""GitHub client for reading issue bodies and applying labels."""

import logging

from github import Github

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub client for issue lookup and labeling."""

    def __init__(self, token: str, repo: str = "docker/docker") -> None:
        """
        Initialize GitHub client with Personal Access Token authentication.

        Args:
            token: Personal Access Token for authentication
            repo: Repository in "owner/repo" format

        Raises:
            ValueError: If no token is provided
            GithubException: If the repository cannot be fetched
        """
        if not token:
            raise ValueError("A GitHub token must be provided")

        self._repo_name = repo
        self._labels_cache: list[str] | None = None
        self._github = Github(token)
        self._repo = self._github.get_repo(repo)

    @property
    def repo_name(self) -> str:
        return self._repo_name

    def get_valid_labels(self) -> list[str]:
        """
        Fetch and cache valid labels from the repository.

        Returns:
            List of valid label names from the repository
        """
        if self._labels_cache is not None:
            return self._labels_cache

        labels = self._repo.get_labels()
        self._labels_cache = [label.name for label in labels]
        logger.info(f"Cached {len(self._labels_cache)} labels from {self._repo_name}")
        return self._labels_cache

    def get_issue_body(self, number: int) -> str:
        """Return the body of an issue, or an empty string if it has none."""
        issue = self._repo.get_issue(number)
        return issue.body or ""

    def add_label(self, number: int, label: str) -> None:
        """
        Add a label to an issue.

        Args:
            number: Issue number
            label: Label name, which must already exist in the repository
        """
        issue = self._repo.get_issue(number)
        issue.add_to_labels(label)
        logger.info(f"Labeled #{number} with {label}")
