"""Normalized view of the issue carried by a GitHub `issues` webhook"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tasksync.errors import MalformedPayloadError

ISSUE_STATES = ("open", "closed")


@dataclass(frozen=True)
class GitHubIssue:
    """Snapshot of one GitHub issue as delivered by a webhook."""

    github_id: int
    title: str
    body: str
    state: str
    repository_github_id: int
    number: Optional[int] = None


def _as_int(value: Any) -> Optional[int]:
    # JSON integers only; floats and numeric strings are not coerced.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def parse_issue_payload(payload: Dict[str, Any]) -> GitHubIssue:
    """Build a GitHubIssue from a webhook payload.

    Required: ``issue.id``, ``issue.title``, ``issue.state``, ``issue.body``
    (present, may be null) and ``repository.id``. Every missing or unusable
    field is collected so the error names all of them at once.
    """
    if not isinstance(payload, dict):
        raise MalformedPayloadError(["issue", "repository"])

    missing = []

    issue = payload.get("issue")
    if isinstance(issue, dict):
        if _as_int(issue.get("id")) is None:
            missing.append("issue.id")
        if not isinstance(issue.get("title"), str):
            missing.append("issue.title")
        if issue.get("state") not in ISSUE_STATES:
            missing.append("issue.state")
        body = issue.get("body", 0)
        if body is not None and not isinstance(body, str):
            missing.append("issue.body")
    else:
        missing.append("issue")

    repository = payload.get("repository")
    if isinstance(repository, dict):
        if _as_int(repository.get("id")) is None:
            missing.append("repository.id")
    else:
        missing.append("repository")

    if missing:
        raise MalformedPayloadError(missing)

    return GitHubIssue(
        github_id=_as_int(issue["id"]),
        title=issue["title"],
        body=issue["body"] or "",
        state=issue["state"],
        repository_github_id=_as_int(repository["id"]),
        number=_as_int(issue.get("number")),
    )
