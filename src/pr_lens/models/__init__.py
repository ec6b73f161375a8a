"""Data models for pr-lens."""

from pr_lens.models.snapshot import BranchRef, PullRequestSnapshot

__all__ = [
    "BranchRef",
    "PullRequestSnapshot",
]
