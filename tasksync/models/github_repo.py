"""GitHub repository and project link models"""

from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from tasksync.models.base import Base


class GithubRepo(Base):
    """A GitHub repository known to the service"""

    __tablename__ = "github_repos"

    id = Column(Integer, primary_key=True, index=True)
    # GitHub's numeric repository id (`repository.id` in webhook payloads)
    github_id = Column(BigInteger, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)  # owner/repo
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    project_github_repos = relationship(
        "ProjectGithubRepo",
        back_populates="github_repo",
        order_by="ProjectGithubRepo.id",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<GithubRepo(name='{self.name}', github_id={self.github_id})>"


class ProjectGithubRepo(Base):
    """Link mirroring a GitHub repository into a project"""

    __tablename__ = "project_github_repos"
    __table_args__ = (
        UniqueConstraint("project_id", "github_repo_id", name="uq_project_github_repos_pair"),
    )

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    github_repo_id = Column(Integer, ForeignKey("github_repos.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    project = relationship("Project", back_populates="project_github_repos")
    github_repo = relationship("GithubRepo", back_populates="project_github_repos")

    def __repr__(self):
        return f"<ProjectGithubRepo(project_id={self.project_id}, github_repo_id={self.github_repo_id})>"
