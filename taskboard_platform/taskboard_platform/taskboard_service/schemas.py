from pydantic import BaseModel, Field

from typing import Literal, Optional

Priority = Literal["Low", "Medium", "High"]
Status = Literal["todo", "in-progress", "done"]


# Accounts
class UserCredentials(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


# Projects
class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ProjectResponse(BaseModel):
    id: str
    name: str
    owner_id: str

    model_config = {"from_attributes": True}


# Todos
class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    priority: Priority
    status: Status


class TodoUpdate(BaseModel):
    """
    Partial update of a todo.

    Only the fields present in the request body are applied. Unknown fields
    are rejected instead of being passed through to the store.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {"status": "in-progress"}
            ]
        }
    }


class TodoResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    priority: str
    status: str
    project_id: str
    owner_id: str

    model_config = {"from_attributes": True}


class TodoUpdateResponse(BaseModel):
    message: str
    updatedTodo: TodoResponse


class TodoDeleteResponse(BaseModel):
    message: str
    deletedTodo: TodoResponse


class ErrorResponse(BaseModel):
    detail: str
