"""API routes"""

from tasksync.api import projects, repositories, sync, tasks, users, webhooks

__all__ = ["users", "projects", "repositories", "tasks", "sync", "webhooks"]
