"""Accessors for the GitHub pull request under review.

Review scripts reach this plugin as ``github``::

    if "[WIP]" in github.title():
        warnings.append("PR is classed as Work in Progress")

    if not github.labels():
        failures.append("Please add labels to this PR")

    if len(github.body()) < 5:
        failures.append("Please provide a summary in the Pull Request description")
"""

import logging
from collections.abc import Sequence
from typing import Any

from github import Github

from pr_lens.environment import ReviewEnvironment
from pr_lens.errors import InvalidArgumentError, NotInitializedError
from pr_lens.models.snapshot import PullRequestSnapshot, require
from pr_lens.plugins import Plugin, register_plugin
from pr_lens.sources.base import RequestSource, RequestSourceKind

logger = logging.getLogger(__name__)


def _create_link(href: str, text: str) -> str:
    return f"<a href='{href}'>{text}</a>"


@register_plugin
class GitHubPlugin(Plugin):
    """Read-only view of a GitHub pull request.

    Only usable when the environment's request source is GitHub. Against any
    other source the plugin is still created, but every accessor raises
    NotInitializedError.
    """

    def __init__(self, env: ReviewEnvironment) -> None:
        super().__init__(env)
        source = env.request_source
        self._github: RequestSource | None = None
        if source is not None and source.kind is RequestSourceKind.GITHUB:
            self._github = source
        else:
            kind = source.kind.value if source is not None else "none"
            logger.debug(f"Request source is '{kind}', GitHub accessors unavailable")

    @classmethod
    def instance_name(cls) -> str:
        return "github"

    @property
    def is_available(self) -> bool:
        """Whether the environment provides a GitHub request source."""
        return self._github is not None

    def _source(self) -> RequestSource:
        if self._github is None:
            raise NotInitializedError(
                "The github plugin requires a GitHub request source"
            )
        return self._github

    def _snapshot(self) -> PullRequestSnapshot:
        return self._source().snapshot()

    # PR metadata

    def title(self) -> str:
        """The title of the Pull Request."""
        title = self._snapshot().title
        return "" if title is None else str(title)

    def body(self) -> str:
        """The body text of the Pull Request."""
        body = self._snapshot().body
        return "" if body is None else str(body)

    def author(self) -> str:
        """The username of the author of the Pull Request."""
        return require(self._snapshot().author, "user.login")

    def labels(self) -> list[str]:
        """The labels assigned to the Pull Request, in API order."""
        return self._snapshot().label_names()

    # PR commit metadata

    def branch_for_base(self) -> str:
        """The branch the PR is going to be merged into."""
        return require(self._snapshot().base.ref, "base.ref")

    def branch_for_head(self) -> str:
        """The branch the PR is going to be merged from."""
        return require(self._snapshot().head.ref, "head.ref")

    def base_commit(self) -> str:
        """The base commit the PR is going to be merged onto as a parent."""
        return require(self._snapshot().base.sha, "base.sha")

    def head_commit(self) -> str:
        """The head commit the PR is requesting to be merged from."""
        return require(self._snapshot().head.sha, "head.sha")

    # Raw access

    def pr_json(self) -> dict[str, Any]:
        """The PR JSON as returned by the API."""
        return self._source().pr_json()

    def api(self) -> Github:
        """The GitHub API client used by the request source."""
        return self._source().client()

    def pr_diff(self) -> str:
        """The unified diff produced by GitHub for this PR."""
        return self._source().pr_diff()

    # Formatting

    def html_link(self, paths: str | Sequence[str]) -> str:
        """Build HTML links to files in the head repository at the head commit.

        Example::

            <a href='https://github.com/org/repo/blob/561827e/file.txt'>file.txt</a>

        Several paths are joined as a sentence: ``a, b & c``.

        Args:
            paths: A path or a sequence of paths, relative to the repository root

        Returns:
            HTML anchor(s) as a single string

        Raises:
            InvalidArgumentError: If no paths are given or one is not a string
            MissingFieldError: If the head repository no longer exists
            NotInitializedError: If the environment has no GitHub request source
        """
        head = self._snapshot().head

        if isinstance(paths, str):
            paths = [paths]
        if not paths:
            raise InvalidArgumentError("html_link needs at least one path")
        for path in paths:
            if not isinstance(path, str):
                raise InvalidArgumentError(f"html_link paths must be strings, got {type(path).__name__}")

        repo_url = require(head.repo_html_url, "head.repo")
        commit = require(head.sha, "head.sha")

        links = []
        for path in paths:
            path_with_slash = path if path.startswith("/") else f"/{path}"
            links.append(_create_link(f"{repo_url}/blob/{commit}{path_with_slash}", path))

        if len(links) == 1:
            return links[0]
        return ", ".join(links[:-1]) + " & " + links[-1]
