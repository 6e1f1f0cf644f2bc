"""Task endpoints"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from pydantic import BaseModel
from datetime import datetime

from tasksync.models.base import get_db
from tasksync.models import Task
from tasksync.models.task import TaskStatus

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


class TaskResponse(BaseModel):
    id: int
    project_id: int
    user_id: int
    github_id: Optional[int] = None
    title: str
    markdown: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


@router.get("/", response_model=List[TaskResponse])
def list_tasks(
    project_id: int = None,
    github_id: int = None,
    db: Session = Depends(get_db)
):
    """List tasks"""
    query = db.query(Task).order_by(Task.id)
    if project_id is not None:
        query = query.filter(Task.project_id == project_id)
    if github_id is not None:
        query = query.filter(Task.github_id == github_id)
    return query.all()


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, db: Session = Depends(get_db)):
    """Get a specific task"""
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task
