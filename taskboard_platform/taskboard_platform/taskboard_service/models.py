from sqlalchemy import Column, String, ForeignKey, Text, Enum, Index
from typing import Optional
import uuid

from .db import Base


PRIORITIES = ("Low", "Medium", "High")
STATUSES = ("todo", "in-progress", "done")


def new_id() -> str:
    return str(uuid.uuid4())


def parse_id(value) -> Optional[str]:
    """Return the canonical form of an identifier, or None if it is malformed."""
    if not isinstance(value, str):
        return None
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return None


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"


class Project(Base):
    __tablename__ = "projects"
    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    owner_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<Project(id={self.id}, name={self.name}, owner_id={self.owner_id})>"


class Todo(Base):
    __tablename__ = "todos"
    id = Column(String, primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(Enum(*PRIORITIES, name="todo_priority"), nullable=False)
    status = Column(Enum(*STATUSES, name="todo_status"), nullable=False)
    project_id = Column(String, ForeignKey("projects.id"), nullable=False)
    # Denormalized copy of the parent project's owner
    owner_id = Column(String, ForeignKey("users.id"), nullable=False)

    __table_args__ = (
        Index('ix_todos_project_id_owner_id', 'project_id', 'owner_id'),
    )

    def __repr__(self):
        return f"<Todo(id={self.id}, title={self.title}, status={self.status}, project_id={self.project_id})>"
