"""Database models"""

from tasksync.models.base import Base
from tasksync.models.github_repo import GithubRepo, ProjectGithubRepo
from tasksync.models.project import Project
from tasksync.models.sync_log import SyncLog
from tasksync.models.task import Task
from tasksync.models.user import User

__all__ = [
    "Base",
    "User",
    "Project",
    "GithubRepo",
    "ProjectGithubRepo",
    "Task",
    "SyncLog",
]
