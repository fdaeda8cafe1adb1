from typing import Any

from pydantic import BaseModel, Field, field_validator

from tarefas_api.schemas.rules import require_password, require_string


class UserCreate(BaseModel):
    # A ordem dos campos define a ordem das validações.
    id: Any = Field(default=None, validate_default=True)
    name: Any = Field(default=None, validate_default=True)
    email: Any = Field(default=None, validate_default=True)
    password: Any = Field(default=None, validate_default=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, value):
        return require_string("id", value, min_length=4)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value):
        return require_string("name", value, min_length=2)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return require_string("email", value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value):
        return require_password(value)


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    password: str

    class Config:
        from_attributes = True


class UserCreatedOut(BaseModel):
    message: str
    user: UserOut
