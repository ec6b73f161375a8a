"""Tests for request sources."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from github.GithubException import GithubException

from pr_lens.errors import RequestSourceError
from pr_lens.sources.base import RequestSourceKind
from pr_lens.sources.github import DIFF_MEDIA_TYPE, GitHubRequestSource
from pr_lens.sources.static import StaticRequestSource


@pytest.fixture
def mock_github(pr_json, issue_json):
    """A PyGithub client double serving the sample PR."""
    gh = MagicMock()
    repo = gh.get_repo.return_value
    repo.get_pull.return_value.raw_data = pr_json
    repo.get_pull.return_value.url = pr_json["url"]
    repo.get_issue.return_value.raw_data = issue_json
    return gh


class TestGitHubRequestSource:
    """Tests for the PyGithub-backed request source."""

    def test_kind(self, mock_github):
        """Test the source identifies as GitHub."""
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        assert source.kind is RequestSourceKind.GITHUB

    def test_fetches_pr_and_issue_once(self, mock_github, pr_json, issue_json):
        """Test documents are fetched on first use and reused."""
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        assert source.pr_json() == pr_json
        assert source.pr_json() == pr_json
        assert source.issue_json() == issue_json
        assert source.issue_json() == issue_json

        mock_github.get_repo.assert_called_once_with("test-org/test-repo")
        mock_github.get_repo.return_value.get_pull.assert_called_once_with(42)
        mock_github.get_repo.return_value.get_issue.assert_called_once_with(42)

    def test_snapshot(self, mock_github):
        """Test the snapshot is built from both documents and cached."""
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        snapshot = source.snapshot()

        assert snapshot.author == "testuser"
        assert snapshot.labels == ("enhancement", "security", "needs review")
        assert source.snapshot() is snapshot

    def test_client_is_injected(self, mock_github):
        """Test an injected client is handed out as-is."""
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        assert source.client() is mock_github

    def test_creates_client_lazily(self):
        """Test a PyGithub client is created from the token on first use."""
        with patch("pr_lens.sources.github.Github") as mock_cls:
            source = GitHubRequestSource("test-org/test-repo", 42, token="test-token")
            mock_cls.assert_not_called()

            assert source.client() is mock_cls.return_value
            assert source.client() is mock_cls.return_value
            mock_cls.assert_called_once_with("test-token")

    def test_enterprise_base_url(self):
        """Test GitHub Enterprise URLs are passed to PyGithub."""
        with patch("pr_lens.sources.github.Github") as mock_cls:
            source = GitHubRequestSource(
                "test-org/test-repo",
                42,
                token="test-token",
                base_url="https://github.example.com/api/v3",
            )
            source.client()

            mock_cls.assert_called_once_with("test-token", base_url="https://github.example.com/api/v3")

    def test_fetches_diff(self, mock_github, sample_diff):
        """Test the diff is requested with the diff media type."""
        source = GitHubRequestSource(
            "test-org/test-repo", 42, token="test-token", client=mock_github, diff_timeout_seconds=5
        )

        with patch("pr_lens.sources.github.requests.get") as mock_get:
            mock_get.return_value.text = sample_diff

            assert source.pr_diff() == sample_diff
            assert source.pr_diff() == sample_diff

            mock_get.assert_called_once_with(
                "https://api.github.com/repos/test-org/test-repo/pulls/42",
                headers={
                    "Authorization": "Bearer test-token",
                    "Accept": DIFF_MEDIA_TYPE,
                },
                timeout=5,
            )

    def test_diff_http_error(self, mock_github):
        """Test HTTP failures surface as RequestSourceError."""
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        with patch("pr_lens.sources.github.requests.get") as mock_get:
            mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Not Found")

            with pytest.raises(RequestSourceError, match="diff"):
                source.pr_diff()

    def test_missing_pull_request(self, mock_github):
        """Test API errors surface as RequestSourceError."""
        mock_github.get_repo.return_value.get_pull.side_effect = GithubException(
            404, {"message": "Not Found"}, None
        )
        source = GitHubRequestSource("test-org/test-repo", 42, token="t", client=mock_github)

        with pytest.raises(RequestSourceError, match="PR #42"):
            source.pr_json()

    def test_missing_repository(self, mock_github):
        """Test an unknown repository surfaces as RequestSourceError."""
        mock_github.get_repo.side_effect = GithubException(404, {"message": "Not Found"}, None)
        source = GitHubRequestSource("test-org/missing", 42, token="t", client=mock_github)

        with pytest.raises(RequestSourceError, match="test-org/missing"):
            source.issue_json()


class TestStaticRequestSource:
    """Tests for the in-memory request source."""

    def test_serves_documents(self, pr_json, issue_json, sample_diff):
        """Test documents are served as given."""
        source = StaticRequestSource(pr_json, issue_json, diff=sample_diff, client="client")

        assert source.kind is RequestSourceKind.GITHUB
        assert source.pr_json() is pr_json
        assert source.issue_json() is issue_json
        assert source.pr_diff() == sample_diff
        assert source.client() == "client"

    def test_defaults(self, pr_json):
        """Test missing issue and diff default to empty."""
        source = StaticRequestSource(pr_json)

        assert source.issue_json() == {}
        assert source.pr_diff() == ""
        assert source.client() is None

    def test_from_files(self, pr_files, pr_json, tmp_path, sample_diff):
        """Test loading documents from disk."""
        pr_path, issue_path = pr_files
        diff_path = tmp_path / "pr.diff"
        diff_path.write_text(sample_diff)

        source = StaticRequestSource.from_files(
            pr_path, issue_path, diff_path, kind=RequestSourceKind.LOCAL
        )

        assert source.pr_json() == pr_json
        assert source.snapshot().labels == ("enhancement", "security", "needs review")
        assert source.pr_diff() == sample_diff
        assert source.kind is RequestSourceKind.LOCAL
