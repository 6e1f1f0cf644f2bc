"""Resolve the projects a GitHub repository is mirrored into"""

from typing import List

from sqlalchemy.orm import Session

from tasksync.models import GithubRepo, ProjectGithubRepo


class RepositoryLinkResolver:
    """Looks up project links for a GitHub repository id"""

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, repository_github_id: int) -> List[ProjectGithubRepo]:
        """Return current links for the repository, oldest first.

        An unknown repository and a repository without links both yield [].
        """
        return (
            self.db.query(ProjectGithubRepo)
            .join(GithubRepo, ProjectGithubRepo.github_repo_id == GithubRepo.id)
            .filter(GithubRepo.github_id == repository_github_id)
            .order_by(ProjectGithubRepo.id)
            .all()
        )
