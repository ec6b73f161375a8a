"""Request source contract."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pr_lens.models.snapshot import PullRequestSnapshot


class RequestSourceKind(Enum):
    """Code hosting platforms a request source can speak for."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET_SERVER = "bitbucket_server"
    LOCAL = "local"


class RequestSource(ABC):
    """Supplies the pull request under review.

    Implementations fetch and cache the pull request and issue documents.
    Consumers only read from them.
    """

    kind: RequestSourceKind

    def __init__(self) -> None:
        self._snapshot: PullRequestSnapshot | None = None

    @abstractmethod
    def pr_json(self) -> dict[str, Any]:
        """Raw pull request document."""

    @abstractmethod
    def issue_json(self) -> dict[str, Any]:
        """Raw issue document for the same number (labels live here)."""

    @abstractmethod
    def pr_diff(self) -> str:
        """Unified diff of the pull request."""

    @abstractmethod
    def client(self) -> Any:
        """Handle to the underlying API client."""

    def snapshot(self) -> PullRequestSnapshot:
        """Typed view of the pull request, built on first use."""
        if self._snapshot is None:
            self._snapshot = PullRequestSnapshot.from_json(self.pr_json(), self.issue_json())
        return self._snapshot
