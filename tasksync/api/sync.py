"""Sync log endpoints"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime

from tasksync.models.base import get_db
from tasksync.models import SyncLog
from tasksync.models.sync_log import SyncStatus

router = APIRouter(prefix="/api/sync", tags=["sync"])


class SyncLogResponse(BaseModel):
    id: int
    delivery_id: Optional[str] = None
    event_type: Optional[str] = None
    action: Optional[str] = None
    repository_github_id: Optional[int] = None
    issue_github_id: Optional[int] = None
    status: SyncStatus
    task_count: int
    message: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


@router.get("/logs", response_model=List[SyncLogResponse])
def list_sync_logs(
    limit: int = 100,
    status: Optional[SyncStatus] = None,
    db: Session = Depends(get_db)
):
    """List sync logs"""
    query = db.query(SyncLog).order_by(SyncLog.created_at.desc(), SyncLog.id.desc())
    if status is not None:
        query = query.filter(SyncLog.status == status)
    return query.limit(limit).all()
