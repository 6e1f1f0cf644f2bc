"""Project model"""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from tasksync.models.base import Base


class Project(Base):
    """Internal project that tasks belong to"""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    project_github_repos = relationship(
        "ProjectGithubRepo", back_populates="project", order_by="ProjectGithubRepo.id"
    )

    def __repr__(self):
        return f"<Project(title='{self.title}')>"
