from tarefas_api.core.errors import ValidationError

USER_ID_PREFIX = "f"
TASK_ID_PREFIX = "t"


def ensure_prefix(label: str, value: str, prefix: str) -> str:
    if not value.startswith(prefix):
        raise ValidationError(f"'{label}' deve iniciar com a letra '{prefix}'")
    return value
