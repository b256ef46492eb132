"""
Todo routes - kanban board items scoped to a project and its owner.

GET/POST take a project id in the path; PATCH/DELETE take a todo id.
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from ..dependencies import get_current_user, get_resource_store
from ..errors import InternalError, TaskboardError
from ..models import User
from ..resources import ResourceStore
from ..schemas import (
    ErrorResponse,
    TodoCreate,
    TodoDeleteResponse,
    TodoResponse,
    TodoUpdate,
    TodoUpdateResponse,
)

router = APIRouter(prefix="/todos", tags=["todos"])
logger = logging.getLogger(__name__)

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid id"},
    403: {"model": ErrorResponse, "description": "Owned by another user"},
    404: {"model": ErrorResponse, "description": "Not found"},
}


@router.get("/{project_id}", response_model=list[TodoResponse], responses={400: _ERRORS[400]})
def list_todos(
    project_id: str,
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    try:
        return store.list_todos(user, project_id)
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Fetching todos failed: project_id=%s", project_id)
        raise InternalError("Error fetching todos") from e


@router.post(
    "/{project_id}",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
)
def create_todo(
    project_id: str,
    payload: TodoCreate,
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    try:
        return store.create_todo(
            user,
            project_id,
            title=payload.title,
            description=payload.description,
            priority=payload.priority,
            status=payload.status,
        )
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Creating todo failed: project_id=%s", project_id)
        raise InternalError("Error creating todo") from e


@router.patch("/{todo_id}", response_model=TodoUpdateResponse, responses=_ERRORS)
def update_todo(
    todo_id: str,
    payload: TodoUpdate,
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    """Partial update, including status changes from drag-and-drop on the board."""
    try:
        todo = store.update_todo(user, todo_id, payload.model_dump(exclude_unset=True))
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Updating todo failed: todo_id=%s", todo_id)
        raise InternalError("Error updating todo") from e

    return TodoUpdateResponse(message="Todo updated", updatedTodo=TodoResponse.model_validate(todo))


@router.delete("/{todo_id}", response_model=TodoDeleteResponse, responses=_ERRORS)
def delete_todo(
    todo_id: str,
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    try:
        todo = store.delete_todo(user, todo_id)
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Deleting todo failed: todo_id=%s", todo_id)
        raise InternalError("Error deleting todo") from e

    return TodoDeleteResponse(message="Todo deleted", deletedTodo=TodoResponse.model_validate(todo))
