import os
from unittest.mock import MagicMock, patch

from github import BadCredentialsException, GithubException, UnknownObjectException

from labeler.main import main


def test_main_config_error_exits_nonzero() -> None:
    with patch.dict(os.environ, {}, clear=True), patch("labeler.main.load_dotenv"):
        assert main(["42"]) == 1


def test_main_labels_each_issue() -> None:
    env = {"GITHUB_TOKEN": "token", "GITHUB_REPO": "Test/Repo"}
    with patch.dict(os.environ, env, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.main.GitHubClient") as mock_client, \
            patch("labeler.main.label_issue") as mock_label_issue:
        assert main(["1", "2"]) == 0
        assert mock_label_issue.call_count == 2
        mock_label_issue.assert_called_with(mock_client.return_value, 2, dry_run=False)


def test_main_rejects_non_numeric_argument() -> None:
    env = {"GITHUB_TOKEN": "token"}
    with patch.dict(os.environ, env, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.main.GitHubClient"), \
            patch("labeler.main.label_issue") as mock_label_issue:
        assert main(["abc", "3"]) == 1
        mock_label_issue.assert_called_once()


def test_main_continues_after_github_error() -> None:
    env = {"GITHUB_TOKEN": "token"}
    failing = MagicMock(side_effect=[GithubException(404, {"message": "Not Found"}), "version/1.8"])
    with patch.dict(os.environ, env, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.main.GitHubClient"), \
            patch("labeler.main.label_issue", failing):
        assert main(["1", "2"]) == 1
        assert failing.call_count == 2


def test_main_app_id_without_token_exits_nonzero() -> None:
    with patch.dict(os.environ, {"GITHUB_APP_ID": "1"}, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.main.GitHubClient") as mock_client:
        assert main(["1"]) == 1
        mock_client.assert_not_called()


def test_main_bad_credentials_exits_nonzero() -> None:
    env = {"GITHUB_TOKEN": "bad-token"}
    with patch.dict(os.environ, env, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.services.github_client.Github") as mock_github, \
            patch("labeler.main.label_issue") as mock_label_issue:
        mock_github.return_value.get_repo.side_effect = BadCredentialsException(
            401, {"message": "Bad credentials"}
        )
        assert main(["1"]) == 1
        mock_label_issue.assert_not_called()


def test_main_unknown_repo_exits_nonzero() -> None:
    env = {"GITHUB_TOKEN": "token", "GITHUB_REPO": "nobody/nothing"}
    with patch.dict(os.environ, env, clear=True), \
            patch("labeler.main.load_dotenv"), \
            patch("labeler.services.github_client.Github") as mock_github:
        mock_github.return_value.get_repo.side_effect = UnknownObjectException(
            404, {"message": "Not Found"}
        )
        assert main(["1"]) == 1
