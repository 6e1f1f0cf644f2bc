"""GitHub repository and project link endpoints"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from tasksync.models import GithubRepo, Project, ProjectGithubRepo
from tasksync.models.base import get_db

router = APIRouter(prefix="/api/repositories", tags=["repositories"])


class GithubRepoCreate(BaseModel):
    github_id: int
    name: str


class ProjectLinkCreate(BaseModel):
    project_id: int


class ProjectLinkResponse(BaseModel):
    id: int
    project_id: int
    github_repo_id: int
    created_at: datetime

    class Config:
        from_attributes = True


class GithubRepoResponse(BaseModel):
    id: int
    github_id: int
    name: str
    created_at: datetime
    project_github_repos: List[ProjectLinkResponse] = []

    class Config:
        from_attributes = True


def _get_repo_or_404(db: Session, repo_id: int) -> GithubRepo:
    repo = db.query(GithubRepo).filter(GithubRepo.id == repo_id).first()
    if not repo:
        raise HTTPException(status_code=404, detail="Repository not found")
    return repo


@router.get("/", response_model=List[GithubRepoResponse])
def list_repositories(db: Session = Depends(get_db)):
    """List all GitHub repositories with their project links"""
    return db.query(GithubRepo).order_by(GithubRepo.id).all()


@router.post("/", response_model=GithubRepoResponse)
def create_repository(repo: GithubRepoCreate, db: Session = Depends(get_db)):
    """Register a GitHub repository"""
    existing = db.query(GithubRepo).filter(GithubRepo.github_id == repo.github_id).first()
    if existing:
        raise HTTPException(status_code=400, detail="Repository already registered")

    db_repo = GithubRepo(**repo.dict())
    db.add(db_repo)
    db.commit()
    db.refresh(db_repo)
    return db_repo


@router.get("/{repo_id}", response_model=GithubRepoResponse)
def get_repository(repo_id: int, db: Session = Depends(get_db)):
    """Get a specific repository"""
    return _get_repo_or_404(db, repo_id)


@router.post("/{repo_id}/links", response_model=ProjectLinkResponse)
def link_project(repo_id: int, link: ProjectLinkCreate, db: Session = Depends(get_db)):
    """Mirror a repository's issues into a project"""
    repo = _get_repo_or_404(db, repo_id)
    project = db.query(Project).filter(Project.id == link.project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    existing = (
        db.query(ProjectGithubRepo)
        .filter(
            ProjectGithubRepo.github_repo_id == repo.id,
            ProjectGithubRepo.project_id == project.id,
        )
        .first()
    )
    if existing:
        raise HTTPException(status_code=400, detail="Project already linked to repository")

    db_link = ProjectGithubRepo(project_id=project.id, github_repo_id=repo.id)
    db.add(db_link)
    db.commit()
    db.refresh(db_link)
    return db_link


@router.delete("/{repo_id}/links/{project_id}")
def unlink_project(repo_id: int, project_id: int, db: Session = Depends(get_db)):
    """Stop mirroring a repository into a project (existing tasks are kept)"""
    link = (
        db.query(ProjectGithubRepo)
        .filter(
            ProjectGithubRepo.github_repo_id == repo_id,
            ProjectGithubRepo.project_id == project_id,
        )
        .first()
    )
    if not link:
        raise HTTPException(status_code=404, detail="Project link not found")

    db.delete(link)
    db.commit()
    return {"message": "Project link deleted successfully"}
