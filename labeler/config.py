"""Configuration management for the version labeler."""
import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """Labeler configuration loaded from environment variables."""

    # GitHub
    github_token: str = field(default_factory=lambda: os.getenv("GITHUB_TOKEN", ""))
    github_repo: str = field(default_factory=lambda: os.getenv("GITHUB_REPO", "docker/docker"))

    # Behaviour
    dry_run: bool = field(
        default_factory=lambda: os.getenv("DRY_RUN", "false").lower() == "true"
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> list[str]:
        """Validate required configuration. Returns list of errors."""
        errors = []
        if not self.github_token:
            errors.append("GITHUB_TOKEN is required")
        if "/" not in self.github_repo:
            errors.append(f"GITHUB_REPO must be in owner/repo format, got {self.github_repo!r}")
        return errors
