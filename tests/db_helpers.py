"""In-memory database and small factories shared by storage tests"""
import copy
import json
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tasksync.models import GithubRepo, Project, ProjectGithubRepo, Task, User
from tasksync.models.base import init_db

FIXTURES = Path(__file__).parent / "fixtures"


def load_event_fixture(name):
    with open(FIXTURES / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


def issue_payload(**issue_overrides):
    payload = copy.deepcopy(load_event_fixture("issues_opened"))
    payload["issue"].update(issue_overrides)
    return payload


def make_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine


def make_session(engine=None):
    engine = engine or make_engine()
    return sessionmaker(autoflush=False, bind=engine)()


def insert_user(db, username="alice", github_id=None):
    user = User(username=username, github_id=github_id)
    db.add(user)
    db.commit()
    return user


def insert_github_repo(db, github_id=35129377, name="baxterthehacker/public-repo", projects=0):
    repo = GithubRepo(github_id=github_id, name=name)
    db.add(repo)
    db.commit()
    for i in range(projects):
        project = Project(title=f"{name} mirror {i + 1}")
        db.add(project)
        db.commit()
        db.add(ProjectGithubRepo(project_id=project.id, github_repo_id=repo.id))
        db.commit()
    db.refresh(repo)
    return repo


def insert_task(db, project_id, user_id, github_id=None, title="Existing", markdown="Old body"):
    task = Task(
        project_id=project_id,
        user_id=user_id,
        github_id=github_id,
        title=title,
        markdown=markdown,
    )
    db.add(task)
    db.commit()
    return task
