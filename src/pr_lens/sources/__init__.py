"""Request sources: where pull request data comes from."""

from pr_lens.sources.base import RequestSource, RequestSourceKind
from pr_lens.sources.github import GitHubRequestSource
from pr_lens.sources.static import StaticRequestSource

__all__ = [
    "GitHubRequestSource",
    "RequestSource",
    "RequestSourceKind",
    "StaticRequestSource",
]
