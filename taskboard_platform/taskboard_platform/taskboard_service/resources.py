"""
Ownership-scoped store for projects and todos.

Every operation takes the authenticated user (the actor) first. Reads are
filtered by the actor's id, writes are stamped with it, and mutations of an
existing todo are refused unless the actor owns it.
"""
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.orm import Session

from .errors import Forbidden, InvalidId, NotFound, ValidationError
from .models import PRIORITIES, STATUSES, Project, Todo, User, parse_id

logger = logging.getLogger(__name__)

UPDATABLE_TODO_FIELDS = ("title", "description", "priority", "status")


def _require_id(value: str, kind: str) -> str:
    canonical = parse_id(value)
    if canonical is None:
        raise InvalidId(f"Invalid {kind} ID")
    return canonical


def _check_title(title) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    return title


def _check_priority(priority) -> str:
    if priority not in PRIORITIES:
        raise ValidationError(f"Priority must be one of: {', '.join(PRIORITIES)}")
    return priority


def _check_status(status) -> str:
    if status not in STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(STATUSES)}")
    return status


def _check_description(description) -> Optional[str]:
    if description is not None and not isinstance(description, str):
        raise ValidationError("Description must be a string")
    return description


_TODO_FIELD_CHECKS = {
    "title": _check_title,
    "description": _check_description,
    "priority": _check_priority,
    "status": _check_status,
}


class ResourceStore:
    def __init__(self, db: Session):
        self.db = db

    # ---------------- Projects ----------------

    def list_projects(self, actor: User) -> List[Project]:
        return self.db.query(Project).filter(Project.owner_id == actor.id).all()

    def create_project(self, actor: User, name: str) -> Project:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Project name is required")

        project = Project(name=name, owner_id=actor.id)
        self.db.add(project)
        self.db.commit()
        logger.info("Project created: project_id=%s owner_id=%s", project.id, actor.id)
        return project

    def get_project(self, actor: User, project_id: str) -> Project:
        canonical = _require_id(project_id, "project")
        project = self.db.query(Project).filter(Project.id == canonical).first()
        if project is None:
            raise NotFound("Project not found")
        if project.owner_id != actor.id:
            logger.warning(
                "Project access refused: project_id=%s owner_id=%s actor_id=%s",
                project.id, project.owner_id, actor.id
            )
            raise Forbidden("Not allowed to access this project")
        return project

    # ---------------- Todos ----------------

    def list_todos(self, actor: User, project_id: str) -> List[Todo]:
        """
        Todos of a project that belong to the actor.

        A project owned by someone else, or one that does not exist, simply
        yields an empty list.
        """
        canonical = _require_id(project_id, "project")
        return (
            self.db.query(Todo)
            .filter(Todo.project_id == canonical, Todo.owner_id == actor.id)
            .all()
        )

    def create_todo(
        self,
        actor: User,
        project_id: str,
        title: str,
        priority: str,
        status: str,
        description: Optional[str] = None,
    ) -> Todo:
        title = _check_title(title)
        priority = _check_priority(priority)
        status = _check_status(status)
        description = _check_description(description)

        project = self.get_project(actor, project_id)

        todo = Todo(
            title=title,
            description=description,
            priority=priority,
            status=status,
            project_id=project.id,
            owner_id=actor.id,
        )
        self.db.add(todo)
        self.db.commit()
        logger.info("Todo created: todo_id=%s project_id=%s owner_id=%s", todo.id, project.id, actor.id)
        return todo

    def _get_owned_todo(self, actor: User, todo_id: str) -> Todo:
        canonical = _require_id(todo_id, "todo")
        todo = self.db.query(Todo).filter(Todo.id == canonical).first()
        if todo is None:
            raise NotFound("Todo not found")
        if todo.owner_id != actor.id:
            logger.warning(
                "Todo access refused: todo_id=%s owner_id=%s actor_id=%s",
                todo.id, todo.owner_id, actor.id
            )
            raise Forbidden("Not allowed to modify this todo")
        return todo

    def update_todo(self, actor: User, todo_id: str, changes: Dict[str, Any]) -> Todo:
        """
        Apply a partial update to a todo owned by the actor.

        Args:
            actor: authenticated user
            todo_id: id of the todo to change
            changes: subset of title, description, priority and status

        Raises:
            InvalidId: todo_id is malformed (checked before any query)
            ValidationError: unknown field, or a field value that fails validation
            NotFound: no todo with this id
            Forbidden: the todo belongs to another user
        """
        canonical = _require_id(todo_id, "todo")

        unknown = set(changes) - set(UPDATABLE_TODO_FIELDS)
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")
        checked = {field: _TODO_FIELD_CHECKS[field](value) for field, value in changes.items()}

        todo = self._get_owned_todo(actor, canonical)
        for field, value in checked.items():
            setattr(todo, field, value)
        self.db.commit()
        logger.info("Todo updated: todo_id=%s fields=%s", todo.id, ",".join(sorted(checked)))
        return todo

    def delete_todo(self, actor: User, todo_id: str) -> Todo:
        todo = self._get_owned_todo(actor, todo_id)
        self.db.delete(todo)
        self.db.commit()
        logger.info("Todo deleted: todo_id=%s owner_id=%s", todo.id, actor.id)
        return todo
