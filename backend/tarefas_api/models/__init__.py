from tarefas_api.models.assignment import Assignment  # noqa: F401
from tarefas_api.models.task import Task  # noqa: F401
from tarefas_api.models.user import User  # noqa: F401
