import re
from typing import Any, Optional

PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^0-9a-zA-Z]).{8,12}",
    re.ASCII,
)
PASSWORD_MESSAGE = (
    "'password' deve possuir entre 8 e 12 caracteres, com letras maiúsculas e minúsculas "
    "e no mínimo um número e um caractere especial"
)
STATUS_MESSAGE = "'status' deve ser number (0 para incompleta ou 1 para completa)"


def require_string(label: str, value: Any, min_length: Optional[int] = None) -> str:
    if not isinstance(value, str):
        raise ValueError(f"'{label}' deve ser string")
    if min_length is not None and len(value) < min_length:
        raise ValueError(f"'{label}' deve possuir pelo menos {min_length} caracteres")
    return value


def require_password(value: Any) -> str:
    require_string("password", value)
    if not PASSWORD_PATTERN.fullmatch(value):
        raise ValueError(PASSWORD_MESSAGE)
    return value


def require_status(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(STATUS_MESSAGE)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(STATUS_MESSAGE)
        value = int(value)
    return value
