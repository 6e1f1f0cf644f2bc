"""GitHub webhook intake"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasksync.config import settings
from tasksync.errors import MalformedPayloadError, TaskPersistenceError, TaskSyncError, UnknownSenderError
from tasksync.models import SyncLog, User
from tasksync.models.sync_log import SyncStatus
from tasksync.services.github_issue import GitHubIssue, parse_issue_payload
from tasksync.services.task_syncer import TaskSyncer

logger = logging.getLogger(__name__)

ISSUES_EVENT = "issues"


class WebhookHandler:
    """Routes GitHub deliveries to the task syncer and records the outcome"""

    def __init__(self, db: Session):
        self.db = db
        self.syncer = TaskSyncer(db)

    def _log_sync(
        self,
        status: SyncStatus,
        *,
        event_type: Optional[str],
        action: Optional[str],
        delivery_id: Optional[str],
        issue: Optional[GitHubIssue] = None,
        task_count: int = 0,
        message: str = "",
    ):
        """Log a processed delivery"""
        log = SyncLog(
            delivery_id=delivery_id,
            event_type=event_type,
            action=action,
            repository_github_id=issue.repository_github_id if issue else None,
            issue_github_id=issue.github_id if issue else None,
            status=status,
            task_count=task_count,
            message=message,
        )
        self.db.add(log)
        self.db.commit()

    def resolve_actor(self, payload: Dict[str, Any]) -> User:
        """User for the delivery's sender, created on first sight if allowed."""
        sender = payload.get("sender")
        if not isinstance(sender, dict) or sender.get("id") is None or not sender.get("login"):
            raise MalformedPayloadError(["sender"])

        sender_id = sender["id"]
        if not isinstance(sender_id, int) or isinstance(sender_id, bool):
            raise MalformedPayloadError(["sender.id"])

        try:
            return self._find_or_create_user(sender_id, str(sender["login"]))
        except SQLAlchemyError as e:
            self.db.rollback()
            message = f"Failed to resolve user for GitHub account {sender_id}: {e}"
            logger.error(message)
            raise TaskPersistenceError(None, e, message) from e

    def _find_or_create_user(self, sender_id: int, login: str) -> User:
        user = self.db.query(User).filter(User.github_id == sender_id).first()
        if user:
            return user

        if not settings.create_unknown_senders:
            raise UnknownSenderError(sender_id)

        username = login
        if self.db.query(User).filter(User.username == username).first():
            username = f"{username}-{sender_id}"

        user = User(username=username, github_id=sender_id)
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            # A concurrent delivery from the same sender created the user first.
            self.db.rollback()
            user = self.db.query(User).filter(User.github_id == sender_id).first()
            if user is None:
                raise
            return user

        self.db.refresh(user)
        logger.info(f"Created user '{user.username}' for GitHub account {sender_id}")
        return user

    def handle(
        self,
        event_type: Optional[str],
        payload: Dict[str, Any],
        delivery_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Process one delivery.

        Deliveries that are not syncable issue actions are acknowledged and
        skipped. Sync failures are logged and re-raised for the caller.
        """
        action = payload.get("action") if isinstance(payload, dict) else None

        if event_type != ISSUES_EVENT or action not in settings.synced_actions():
            message = f"Ignored {event_type} event with action {action!r}"
            logger.info(message)
            self._log_sync(
                SyncStatus.SKIPPED,
                event_type=event_type,
                action=action,
                delivery_id=delivery_id,
                message=message,
            )
            return {"status": "ignored", "message": message}

        issue = None
        try:
            issue = parse_issue_payload(payload)
            actor = self.resolve_actor(payload)
            tasks = self.syncer.sync_all(None, actor, payload)
        except TaskSyncError as e:
            logger.error(f"Webhook delivery {delivery_id} failed: {e}")
            self._log_sync(
                SyncStatus.FAILED,
                event_type=event_type,
                action=action,
                delivery_id=delivery_id,
                issue=issue,
                message=str(e),
            )
            raise

        self._log_sync(
            SyncStatus.SUCCESS,
            event_type=event_type,
            action=action,
            delivery_id=delivery_id,
            issue=issue,
            task_count=len(tasks),
            message=f"Synced {len(tasks)} task(s)",
        )
        return {"status": "success", "tasks": tasks}
