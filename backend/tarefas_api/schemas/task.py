from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from tarefas_api.schemas.rules import require_status, require_string
from tarefas_api.schemas.user import UserOut


class TaskCreate(BaseModel):
    id: Any = Field(default=None, validate_default=True)
    title: Any = Field(default=None, validate_default=True)
    description: Any = Field(default=None, validate_default=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, value):
        return require_string("id", value, min_length=4)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value):
        return require_string("title", value, min_length=2)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        return require_string("description", value)


class TaskUpdate(BaseModel):
    """Atualização parcial: só os campos enviados (model_fields_set) são validados e aplicados."""

    id: Any = None
    title: Any = None
    description: Any = None
    created_at: Any = Field(default=None, alias="createdAt")
    status: Any = None

    @field_validator("id")
    @classmethod
    def validate_id(cls, value):
        return require_string("id", value, min_length=4)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value):
        return require_string("title", value, min_length=2)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value):
        return require_string("description", value)

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, value):
        return require_string("createdAt", value)

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return require_status(value)


class TaskOut(BaseModel):
    id: str
    title: str
    description: str
    created_at: str
    status: int

    class Config:
        from_attributes = True


class TaskSavedOut(BaseModel):
    message: str
    task: TaskOut


class TaskWithResponsiblesOut(TaskOut):
    responsibles: List[UserOut] = Field(default_factory=list)
