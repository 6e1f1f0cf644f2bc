"""User model"""

from datetime import datetime

from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from tasksync.models.base import Base


class User(Base):
    """A person tasks are attributed to"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    # GitHub account id; webhook senders are matched on it.
    github_id = Column(BigInteger, unique=True, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f"<User(username='{self.username}', github_id={self.github_id})>"
