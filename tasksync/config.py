"""Application configuration"""

from typing import Set

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Database
    database_url: str = "sqlite:///./tasksync.db"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Webhooks
    # Comma-separated `issues` event actions that trigger a task sync.
    # Anything else is acknowledged and skipped.
    synced_issue_actions: str = "opened,edited,closed,reopened"
    # When a delivery's sender has no matching user, create one from the
    # sender's login. If disabled, such deliveries are rejected.
    create_unknown_senders: bool = True

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def synced_actions(self) -> Set[str]:
        """Parsed set of issue actions to sync."""
        return {a.strip().lower() for a in (self.synced_issue_actions or "").split(",") if a.strip()}


settings = Settings()
