"""Sync log model"""
from sqlalchemy import BigInteger, Column, Integer, String, DateTime, Text, Enum
from datetime import datetime
import enum
from tasksync.models.base import Base


class SyncStatus(str, enum.Enum):
    """Sync status enumeration"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class SyncLog(Base):
    """Log of processed webhook deliveries"""

    __tablename__ = "sync_logs"

    id = Column(Integer, primary_key=True, index=True)

    # Delivery information
    delivery_id = Column(String, nullable=True, index=True)  # X-GitHub-Delivery
    event_type = Column(String, nullable=True)  # X-GitHub-Event
    action = Column(String, nullable=True)

    # Issue information
    repository_github_id = Column(BigInteger, nullable=True)
    issue_github_id = Column(BigInteger, nullable=True)

    # Sync details
    status = Column(Enum(SyncStatus), nullable=False)
    task_count = Column(Integer, nullable=False, default=0)
    message = Column(Text, nullable=True)

    # Timestamp
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    def __repr__(self):
        return f"<SyncLog(status={self.status}, delivery_id={self.delivery_id})>"
