"""Task sync errors"""

from typing import Iterable, Optional


class TaskSyncError(Exception):
    """Base class for failures of a webhook-driven task sync"""


class MalformedPayloadError(TaskSyncError, ValueError):
    """Webhook payload is missing fields required to build an issue.

    Raised before anything is read from or written to storage.
    """

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(missing)
        super().__init__(f"Malformed issue payload, missing: {', '.join(self.missing)}")


class TaskPersistenceError(TaskSyncError):
    """A storage read or write failed; the whole batch was rolled back.

    `project_id` names the project being written, or is None when the
    failure was not tied to one project (link lookup, the final commit).
    """

    def __init__(self, project_id: Optional[int], cause: BaseException, message: Optional[str] = None):
        self.project_id = project_id
        self.cause = cause
        super().__init__(message or f"Failed to persist task for project {project_id}: {cause}")


class UnknownSenderError(TaskSyncError):
    """Webhook sender has no matching user and auto-creation is disabled."""

    def __init__(self, sender_github_id: Optional[int]):
        self.sender_github_id = sender_github_id
        super().__init__(f"No user linked to GitHub account {sender_github_id}")
