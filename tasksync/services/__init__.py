"""Services"""

from tasksync.services.github_issue import GitHubIssue, parse_issue_payload
from tasksync.services.repo_links import RepositoryLinkResolver
from tasksync.services.task_mapper import map_task_attributes
from tasksync.services.task_matcher import TaskMatcher
from tasksync.services.task_syncer import TaskSyncer

__all__ = [
    "GitHubIssue",
    "parse_issue_payload",
    "RepositoryLinkResolver",
    "TaskMatcher",
    "map_task_attributes",
    "TaskSyncer",
]
