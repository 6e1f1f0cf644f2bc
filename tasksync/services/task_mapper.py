"""Map a GitHub issue onto task attributes"""

from typing import Any, Dict, Optional

from tasksync.models.task import Task, TaskStatus
from tasksync.services.github_issue import GitHubIssue

_STATE_TO_STATUS = {
    "open": TaskStatus.OPEN,
    "closed": TaskStatus.CLOSED,
}


def status_for_state(state: str) -> TaskStatus:
    """Task status for a GitHub issue state."""
    try:
        return _STATE_TO_STATUS[state]
    except KeyError:
        raise ValueError(f"Unknown issue state: {state!r}") from None


def map_task_attributes(
    existing: Optional[Task],
    issue: GitHubIssue,
    actor_id: int,
    *,
    project_id: Optional[int] = None,
) -> Dict[str, Any]:
    """Attributes to persist for `issue` in one project.

    With no existing task this is the create shape and `project_id` is
    required. With an existing task, its id and project are kept and the
    acting user replaces whoever last touched it.
    """
    attrs: Dict[str, Any] = {
        "user_id": actor_id,
        "github_id": issue.github_id,
        "markdown": issue.body,
        "title": issue.title,
        "status": status_for_state(issue.state),
    }

    if existing is None:
        if project_id is None:
            raise ValueError("project_id is required to map a new task")
        attrs["project_id"] = project_id
    else:
        attrs["id"] = existing.id
        attrs["project_id"] = existing.project_id

    return attrs
