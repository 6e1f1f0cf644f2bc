"""Database base configuration"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from tasksync.config import settings

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _ensure_tasks_unique_index(bind):
    """
    Schema hardening for databases created before the tasks table carried its
    unique constraint: the upsert in TaskSyncer needs a unique index on
    (project_id, github_id) to target with ON CONFLICT.
    """
    with bind.begin() as conn:
        if bind.dialect.name == "sqlite":
            tables = {
                row[0]
                for row in conn.exec_driver_sql(
                    "SELECT name FROM sqlite_master WHERE type='table'"
                ).fetchall()
            }
            if "tasks" not in tables:
                return

        conn.exec_driver_sql(
            "CREATE UNIQUE INDEX IF NOT EXISTS uq_tasks_project_github_id "
            "ON tasks(project_id, github_id)"
        )


def init_db(bind=None):
    """Initialize database"""
    # Ensure all models are imported so SQLAlchemy metadata is populated.
    import tasksync.models  # noqa: F401  (import for side-effects)

    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind)
    _ensure_tasks_unique_index(bind)
