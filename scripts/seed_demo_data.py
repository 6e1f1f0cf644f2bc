"""Seed a demo SQLite DB with sample TaskSync data.

Creates a few users and projects, one GitHub repository mirrored into them,
and replays a sample `issues` delivery through the task syncer.
It does NOT contact GitHub.

Usage:
  python scripts/seed_demo_data.py --db ./data/demo_tasksync.db --overwrite
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def _sqlite_url_for_path(db_path: Path) -> str:
    # SQLAlchemy sqlite absolute path uses 4 slashes: sqlite:////abs/path
    p = db_path.expanduser().resolve()
    return f"sqlite:////{p}"


@dataclass(frozen=True)
class SeedResult:
    db_path: Path
    task_count: int


def _demo_payload(repo_github_id: int, sender_github_id: int) -> dict:
    return {
        "action": "opened",
        "issue": {
            "id": 444500041,
            "number": 1,
            "title": "Spelling error in the README file",
            "body": "It looks like you accidently spelled 'commit' with two 't's.",
            "state": "open",
        },
        "repository": {"id": repo_github_id, "full_name": "octocat/hello-world"},
        "sender": {"id": sender_github_id, "login": "octocat"},
    }


def seed_demo_db(db_path: Path, overwrite: bool = False) -> SeedResult:
    db_path = db_path.expanduser().resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    if overwrite and db_path.exists():
        db_path.unlink()

    # IMPORTANT: DATABASE_URL must be set before importing tasksync.* modules
    os.environ["DATABASE_URL"] = _sqlite_url_for_path(db_path)
    os.environ.setdefault("LOG_LEVEL", "WARNING")

    from tasksync.models.base import init_db, SessionLocal  # noqa: WPS433
    from tasksync.models import GithubRepo, Project, ProjectGithubRepo, User  # noqa: WPS433
    from tasksync.services.task_syncer import TaskSyncer  # noqa: WPS433

    init_db()

    db = SessionLocal()
    try:
        octocat = User(username="octocat", github_id=583231)
        alice = User(username="alice")
        db.add_all([octocat, alice])

        projects = [Project(title=title) for title in ("Website", "Mobile app", "Docs")]
        db.add_all(projects)

        repo = GithubRepo(github_id=1296269, name="octocat/hello-world")
        db.add(repo)
        db.commit()

        db.add_all([ProjectGithubRepo(project_id=p.id, github_repo_id=repo.id) for p in projects])
        db.commit()
        db.refresh(repo)

        tasks = TaskSyncer(db).sync_all(repo, octocat, _demo_payload(repo.github_id, octocat.github_id))
    finally:
        db.close()

    return SeedResult(db_path=db_path, task_count=len(tasks))


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed a demo TaskSync SQLite DB")
    parser.add_argument(
        "--db",
        default="./data/demo_tasksync.db",
        help="Path to SQLite DB file to create (default: ./data/demo_tasksync.db)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Delete existing DB file first",
    )
    args = parser.parse_args()

    result = seed_demo_db(Path(args.db), overwrite=bool(args.overwrite))
    print(f"Seeded demo DB at: {result.db_path} ({result.task_count} tasks)")


if __name__ == "__main__":
    main()
