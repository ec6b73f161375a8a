"""GitHub request source backed by PyGithub."""

import logging
from typing import Any

import requests
from github import Github
from github.GithubException import GithubException
from github.PullRequest import PullRequest
from github.Repository import Repository

from pr_lens.errors import RequestSourceError
from pr_lens.sources.base import RequestSource, RequestSourceKind

logger = logging.getLogger(__name__)

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


class GitHubRequestSource(RequestSource):
    """Fetches a pull request from the GitHub REST API.

    Every document is fetched on first access and kept for the rest of the
    run.
    """

    kind = RequestSourceKind.GITHUB

    def __init__(
        self,
        repo: str,
        pr_number: int,
        token: str,
        base_url: str | None = None,
        client: Github | None = None,
        diff_timeout_seconds: int = 30,
    ) -> None:
        """Initialize the request source.

        Args:
            repo: Repository in "owner/name" format
            pr_number: Pull request number
            token: GitHub personal access token or app token
            base_url: Optional base URL for GitHub Enterprise
            client: Existing PyGithub client to use instead of creating one
            diff_timeout_seconds: Timeout for the diff download
        """
        super().__init__()
        self.repo_name = repo
        self.pr_number = pr_number
        self._token = token
        self._base_url = base_url
        self._gh = client
        self._diff_timeout = diff_timeout_seconds
        self._repo: Repository | None = None
        self._pull: PullRequest | None = None
        self._pr_json: dict[str, Any] | None = None
        self._issue_json: dict[str, Any] | None = None
        self._diff: str | None = None

    def client(self) -> Github:
        if self._gh is None:
            if self._base_url:
                self._gh = Github(self._token, base_url=self._base_url)
            else:
                self._gh = Github(self._token)
        return self._gh

    def _get_repo(self) -> Repository:
        if self._repo is None:
            try:
                self._repo = self.client().get_repo(self.repo_name)
            except GithubException as e:
                logger.warning(f"Could not load repository {self.repo_name}: {e}")
                raise RequestSourceError(
                    f"Could not load repository {self.repo_name}: {e.status} {e.data}"
                ) from e
        return self._repo

    def _get_pull(self) -> PullRequest:
        if self._pull is None:
            try:
                self._pull = self._get_repo().get_pull(self.pr_number)
            except GithubException as e:
                logger.warning(f"Could not load PR #{self.pr_number}: {e}")
                raise RequestSourceError(
                    f"Could not load PR #{self.pr_number} in {self.repo_name}: {e.status} {e.data}"
                ) from e
        return self._pull

    def pr_json(self) -> dict[str, Any]:
        if self._pr_json is None:
            logger.debug(f"Fetching PR #{self.pr_number} from {self.repo_name}")
            self._pr_json = self._get_pull().raw_data
        return self._pr_json

    def issue_json(self) -> dict[str, Any]:
        if self._issue_json is None:
            logger.debug(f"Fetching issue #{self.pr_number} from {self.repo_name}")
            try:
                self._issue_json = self._get_repo().get_issue(self.pr_number).raw_data
            except GithubException as e:
                logger.warning(f"Could not load issue #{self.pr_number}: {e}")
                raise RequestSourceError(
                    f"Could not load issue #{self.pr_number} in {self.repo_name}: {e.status} {e.data}"
                ) from e
        return self._issue_json

    def pr_diff(self) -> str:
        """Get the unified diff for the PR as GitHub renders it."""
        if self._diff is None:
            url = self._get_pull().url
            headers = {
                "Authorization": f"Bearer {self._token}",
                "Accept": DIFF_MEDIA_TYPE,
            }
            logger.debug(f"Fetching diff from {url}")
            try:
                response = requests.get(url, headers=headers, timeout=self._diff_timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                logger.warning(f"Diff request failed: {e}")
                raise RequestSourceError(f"Could not fetch diff for PR #{self.pr_number}: {e}") from e
            self._diff = response.text
        return self._diff
