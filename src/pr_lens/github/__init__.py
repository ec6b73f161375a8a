"""GitHub integration for pr-lens."""

from pr_lens.github.plugin import GitHubPlugin

__all__ = [
    "GitHubPlugin",
]
