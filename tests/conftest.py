"""Pytest configuration and shared fixtures."""

import copy
import json
from pathlib import Path

import pytest

SAMPLE_PR_JSON = {
    "number": 42,
    "url": "https://api.github.com/repos/test-org/test-repo/pulls/42",
    "html_url": "https://github.com/test-org/test-repo/pull/42",
    "title": "Add user authentication",
    "body": "This PR adds basic user authentication.",
    "user": {"login": "testuser"},
    "base": {
        "ref": "main",
        "sha": "704dc55988c6996f69b6873c2424be7d1de67bbe",
        "repo": {"html_url": "https://github.com/test-org/test-repo"},
    },
    "head": {
        "ref": "feature/auth",
        "sha": "abc123",
        "repo": {"html_url": "https://github.com/org/repo"},
    },
}

SAMPLE_ISSUE_JSON = {
    "number": 42,
    "labels": [
        {"id": 1, "name": "enhancement"},
        {"id": 2, "name": "security"},
        {"id": 3, "name": "needs review"},
    ],
}

SAMPLE_DIFF = """\
diff --git a/auth/login.py b/auth/login.py
index 1234567..abcdefg 100644
--- a/auth/login.py
+++ b/auth/login.py
@@ -10,6 +10,8 @@ def authenticate(username: str, password: str) -> bool:
     hashed = hash_password(password)
     return db.verify_user(username, hashed)
+
+SESSION_TTL = 3600
"""


@pytest.fixture
def pr_json() -> dict:
    """A pull request document as returned by the REST API."""
    return copy.deepcopy(SAMPLE_PR_JSON)


@pytest.fixture
def issue_json() -> dict:
    """The issue document for the same pull request."""
    return copy.deepcopy(SAMPLE_ISSUE_JSON)


@pytest.fixture
def sample_diff() -> str:
    """A small unified diff."""
    return SAMPLE_DIFF


@pytest.fixture
def github_source(pr_json, issue_json, sample_diff):
    """An in-memory GitHub request source."""
    from pr_lens.sources.static import StaticRequestSource

    return StaticRequestSource(pr_json, issue_json=issue_json, diff=sample_diff, client="api-client")


@pytest.fixture
def github(github_source):
    """The github plugin over the in-memory source."""
    from pr_lens.environment import ReviewEnvironment
    from pr_lens.github.plugin import GitHubPlugin

    return GitHubPlugin(ReviewEnvironment(request_source=github_source))


@pytest.fixture
def pr_files(tmp_path: Path, pr_json, issue_json) -> tuple[Path, Path]:
    """PR and issue documents written to JSON files."""
    pr_path = tmp_path / "pr.json"
    issue_path = tmp_path / "issue.json"
    pr_path.write_text(json.dumps(pr_json))
    issue_path.write_text(json.dumps(issue_json))
    return pr_path, issue_path
