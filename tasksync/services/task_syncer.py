"""GitHub issue to task synchronization"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasksync.errors import TaskPersistenceError
from tasksync.models import GithubRepo, ProjectGithubRepo, Task, User
from tasksync.models.task import utcnow
from tasksync.services.github_issue import GitHubIssue, parse_issue_payload
from tasksync.services.repo_links import RepositoryLinkResolver
from tasksync.services.task_mapper import map_task_attributes
from tasksync.services.task_matcher import TaskMatcher

logger = logging.getLogger(__name__)

RepositoryContext = Union[None, int, GithubRepo, Sequence[ProjectGithubRepo]]

# Columns rewritten when a delivery hits an existing (project_id, github_id) row
_UPSERT_UPDATE_COLUMNS = ("user_id", "markdown", "title", "status", "updated_at")

_NATIVE_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class TaskSyncer:
    """Create or update one task per project mirroring a GitHub repository"""

    def __init__(self, db: Session):
        self.db = db
        self.resolver = RepositoryLinkResolver(db)
        self.matcher = TaskMatcher(db)

    @staticmethod
    def _actor_id(actor: Union[User, int]) -> int:
        actor_id = getattr(actor, "id", actor)
        if actor_id is None:
            raise ValueError("An acting user with an id is required")
        return int(actor_id)

    def _links_for(self, repository: RepositoryContext, issue: GitHubIssue) -> List[Any]:
        """Project links to sync, preferring ones the caller already holds."""
        if repository is None:
            return self.resolver.resolve(issue.repository_github_id)
        if isinstance(repository, GithubRepo):
            return list(repository.project_github_repos)
        if isinstance(repository, (list, tuple)):
            return list(repository)
        return self.resolver.resolve(int(repository))

    def _native_upsert(self, insert, attrs: Dict[str, Any]) -> int:
        """INSERT .. ON CONFLICT (project_id, github_id) DO UPDATE, returning the row id."""
        values = {k: v for k, v in attrs.items() if k != "id"}
        now = utcnow()
        values["created_at"] = now
        values["updated_at"] = now

        stmt = insert(Task.__table__).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=["project_id", "github_id"],
            set_={col: stmt.excluded[col] for col in _UPSERT_UPDATE_COLUMNS},
        ).returning(Task.__table__.c.id)
        return self.db.execute(stmt).scalar_one()

    def _fallback_upsert(self, attrs: Dict[str, Any]) -> int:
        """Find-then-write inside a savepoint; a lost insert race becomes an update."""
        values = {k: v for k, v in attrs.items() if k != "id"}
        existing = self.matcher.find(values["project_id"], values["github_id"])
        if existing is None:
            try:
                with self.db.begin_nested():
                    task = Task(**values)
                    self.db.add(task)
                    self.db.flush()
                return task.id
            except IntegrityError:
                # Another delivery created the row first.
                existing = self.matcher.find(values["project_id"], values["github_id"])
                if existing is None:
                    raise

        for col in _UPSERT_UPDATE_COLUMNS:
            if col in values:
                setattr(existing, col, values[col])
        existing.updated_at = utcnow()
        self.db.flush()
        return existing.id

    def _upsert_task(self, attrs: Dict[str, Any]) -> int:
        insert = _NATIVE_UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        if insert is not None:
            return self._native_upsert(insert, attrs)
        return self._fallback_upsert(attrs)

    def sync_all(
        self,
        repository: RepositoryContext,
        actor: Union[User, int],
        payload: Dict[str, Any],
    ) -> List[Task]:
        """Sync the payload's issue into every project linked to its repository.

        `repository` may be a GithubRepo (its links are used as loaded), a
        list of ProjectGithubRepo links, a GitHub repository id, or None to
        resolve links from the payload's repository.

        Returns the tasks in link order. Raises MalformedPayloadError before
        touching storage, and TaskPersistenceError after rolling back the
        whole batch if any project's write fails.
        """
        issue = parse_issue_payload(payload)
        actor_id = self._actor_id(actor)
        try:
            links = self._links_for(repository, issue)
        except SQLAlchemyError as e:
            self.db.rollback()
            message = f"Failed to resolve projects for repository {issue.repository_github_id}: {e}"
            logger.error(message)
            raise TaskPersistenceError(None, e, message) from e

        if not links:
            logger.info(f"No projects linked to repository {issue.repository_github_id}; nothing to sync")
            return []

        logger.info(f"Syncing GitHub issue {issue.github_id} into {len(links)} project(s)")

        task_ids: List[int] = []
        stats = {"created": 0, "updated": 0}
        project_id: Optional[int] = None
        try:
            for link in links:
                project_id = link.project_id
                existing = self.matcher.find(project_id, issue.github_id)
                attrs = map_task_attributes(existing, issue, actor_id, project_id=project_id)
                task_ids.append(self._upsert_task(attrs))
                stats["updated" if existing is not None else "created"] += 1
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Sync of GitHub issue {issue.github_id} failed for project {project_id}: {e}")
            raise TaskPersistenceError(project_id, e) from e

        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            message = f"Commit of GitHub issue {issue.github_id} into {len(links)} project(s) failed: {e}"
            logger.error(message)
            raise TaskPersistenceError(None, e, message) from e

        logger.info(f"Synced GitHub issue {issue.github_id}: {stats}")
        return [self.db.get(Task, task_id, populate_existing=True) for task_id in task_ids]
