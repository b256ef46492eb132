"""
Project routes - list and create projects of the authenticated user.
"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from ..dependencies import get_current_user, get_resource_store
from ..errors import InternalError, TaskboardError
from ..models import User
from ..resources import ResourceStore
from ..schemas import ProjectCreate, ProjectResponse

router = APIRouter(prefix="/projects", tags=["projects"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    try:
        return store.list_projects(user)
    except SQLAlchemyError as e:
        logger.exception("Fetching projects failed: user_id=%s", user.id)
        raise InternalError("Error fetching projects") from e


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    user: User = Depends(get_current_user),
    store: ResourceStore = Depends(get_resource_store),
):
    try:
        return store.create_project(user, payload.name)
    except TaskboardError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Creating project failed: user_id=%s", user.id)
        raise InternalError("Error creating project") from e
