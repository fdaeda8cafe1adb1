from typing import Optional, Type, TypeVar

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def payload_or_empty(payload: Optional[SchemaT], schema: Type[SchemaT]) -> SchemaT:
    """Requisição sem corpo é validada como objeto vazio."""
    if payload is not None:
        return payload
    try:
        return schema.model_validate({})
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors())
