"""The environment a review run executes in."""

from dataclasses import dataclass

from pr_lens.config import Config
from pr_lens.sources.base import RequestSource
from pr_lens.sources.github import GitHubRequestSource


@dataclass
class ReviewEnvironment:
    """Active request source plus the configuration it was built from."""

    request_source: RequestSource
    config: Config | None = None

    @classmethod
    def from_config(cls, config: Config, repo: str, pr_number: int) -> "ReviewEnvironment":
        """Build an environment that reviews a GitHub pull request.

        Args:
            config: Loaded configuration (token, enterprise URL, timeouts)
            repo: Repository in "owner/name" format
            pr_number: Pull request number
        """
        source = GitHubRequestSource(
            repo=repo,
            pr_number=pr_number,
            token=config.github.token,
            base_url=config.github.base_url,
            diff_timeout_seconds=config.github.diff_timeout_seconds,
        )
        return cls(request_source=source, config=config)
