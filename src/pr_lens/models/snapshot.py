"""Typed view of an already-fetched pull request."""

from dataclasses import dataclass, field
from typing import Any, TypeVar

from pr_lens.errors import MissingFieldError

T = TypeVar("T")


def _get(data: Any, path: str) -> Any:
    """Follow a dotted path through nested JSON objects, None if any part is absent."""
    value = data
    for key in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _text(value: Any) -> str | None:
    return None if value is None else str(value)


def require(value: T | None, path: str) -> T:
    """Return ``value``, or raise MissingFieldError for ``path`` when it is None."""
    if value is None:
        raise MissingFieldError(path)
    return value


@dataclass(frozen=True)
class BranchRef:
    """One side (base or head) of a pull request.

    Fields the API response lacks are None; readers decide which ones they need.
    """

    ref: str | None
    sha: str | None
    repo_html_url: str | None = None  # None when the repository is gone (deleted fork)

    @classmethod
    def from_json(cls, data: dict[str, Any], side: str) -> "BranchRef":
        """Build from the ``base`` or ``head`` object of a pull request."""
        return cls(
            ref=_text(_get(data, f"{side}.ref")),
            sha=_text(_get(data, f"{side}.sha")),
            repo_html_url=_text(_get(data, f"{side}.repo.html_url")),
        )


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Immutable pull request metadata, built once from the API responses.

    Building never fails: absent or null fields are stored as None, and a
    label without a name is kept as None in ``labels``. Each reader checks
    only the fields it uses, so one malformed field does not hide the rest.
    """

    title: str | None
    body: str | None
    author: str | None
    base: BranchRef
    head: BranchRef
    labels: tuple[str | None, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(
        cls, pr_json: dict[str, Any], issue_json: dict[str, Any] | None = None
    ) -> "PullRequestSnapshot":
        """Map pull request and issue JSON into a snapshot.

        Args:
            pr_json: Pull request object as returned by the REST API
            issue_json: Issue object for the same number, source of the labels

        Returns:
            PullRequestSnapshot
        """
        labels = tuple(_text(_get(label, "name")) for label in _get(issue_json, "labels") or [])

        return cls(
            title=pr_json.get("title"),
            body=pr_json.get("body"),
            author=_text(_get(pr_json, "user.login")),
            base=BranchRef.from_json(pr_json, "base"),
            head=BranchRef.from_json(pr_json, "head"),
            labels=labels,
        )

    def label_names(self) -> list[str]:
        """Label names in API order.

        Raises:
            MissingFieldError: If a label has no name
        """
        return [require(name, "issue.labels.name") for name in self.labels]
