"""Request source backed by documents already in memory."""

import json
from pathlib import Path
from typing import Any

from pr_lens.sources.base import RequestSource, RequestSourceKind


class StaticRequestSource(RequestSource):
    """Serves pre-loaded pull request data without touching the network."""

    def __init__(
        self,
        pr_json: dict[str, Any],
        issue_json: dict[str, Any] | None = None,
        diff: str = "",
        client: Any = None,
        kind: RequestSourceKind = RequestSourceKind.GITHUB,
    ) -> None:
        super().__init__()
        self.kind = kind
        self._pr_json = pr_json
        self._issue_json = issue_json or {}
        self._diff = diff
        self._client = client

    @classmethod
    def from_files(
        cls,
        pr_path: Path,
        issue_path: Path | None = None,
        diff_path: Path | None = None,
        kind: RequestSourceKind = RequestSourceKind.GITHUB,
    ) -> "StaticRequestSource":
        """Load the documents from JSON files (and the diff from a text file)."""
        with open(pr_path) as f:
            pr_json = json.load(f)
        issue_json = None
        if issue_path is not None:
            with open(issue_path) as f:
                issue_json = json.load(f)
        diff = diff_path.read_text() if diff_path is not None else ""
        return cls(pr_json, issue_json=issue_json, diff=diff, kind=kind)

    def pr_json(self) -> dict[str, Any]:
        return self._pr_json

    def issue_json(self) -> dict[str, Any]:
        return self._issue_json

    def pr_diff(self) -> str:
        return self._diff

    def client(self) -> Any:
        return self._client
