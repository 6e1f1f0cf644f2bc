"""Find the task previously created from a GitHub issue"""

from typing import Optional

from sqlalchemy.orm import Session

from tasksync.models import Task


class TaskMatcher:
    def __init__(self, db: Session):
        self.db = db

    def find(self, project_id: int, github_id: Optional[int]) -> Optional[Task]:
        """Task in `project_id` mirroring issue `github_id`, if any."""
        if github_id is None:
            # Tasks created inside the service are never adopted by a sync.
            return None
        return (
            self.db.query(Task)
            .filter(Task.project_id == project_id, Task.github_id == github_id)
            .first()
        )
