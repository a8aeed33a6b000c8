# labeler/main.py
"""Main entry point for the version labeler."""
import logging
import sys

from dotenv import load_dotenv
from github import GithubException

from labeler.config import Config
from labeler.services.github_client import GitHubClient
from labeler.services.triage import label_issue

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Label each issue number given on the command line. Returns exit status."""
    load_dotenv()
    config = Config()
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return 1

    logging.getLogger().setLevel(config.log_level)
    try:
        client = GitHubClient(token=config.github_token, repo=config.github_repo)
    except GithubException as e:
        logger.error(f"Cannot open {config.github_repo}: {e}")
        return 1

    status = 0
    for arg in sys.argv[1:] if argv is None else argv:
        if not arg.isdigit():
            logger.error(f"Not an issue number: {arg!r}")
            status = 1
            continue
        try:
            label_issue(client, int(arg), dry_run=config.dry_run)
        except GithubException as e:
            logger.error(f"GitHub error on #{arg}: {e}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
