"""Task model"""
from sqlalchemy import BigInteger, Column, DateTime, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import enum
from tasksync.models.base import Base


def utcnow() -> datetime:
    """UTC 'now' as tz-naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskStatus(str, enum.Enum):
    """Task status enumeration"""
    OPEN = "open"
    CLOSED = "closed"


class Task(Base):
    """Unit of work inside a project, optionally mirroring a GitHub issue"""

    __tablename__ = "tasks"
    __table_args__ = (
        # One task per GitHub issue per project. The sync upsert targets this.
        UniqueConstraint("project_id", "github_id", name="uq_tasks_project_github_id"),
    )

    id = Column(Integer, primary_key=True, index=True)

    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # GitHub issue id; NULL for tasks created inside the service
    github_id = Column(BigInteger, nullable=True, index=True)

    title = Column(String, nullable=False)
    markdown = Column(Text, nullable=False, default="")
    status = Column(Enum(TaskStatus), nullable=False, default=TaskStatus.OPEN)

    # Timestamps
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    project = relationship("Project")
    user = relationship("User")

    def __repr__(self):
        return f"<Task(project_id={self.project_id}, github_id={self.github_id}, status={self.status})>"
