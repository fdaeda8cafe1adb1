import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tarefas_api.core.errors import ConflictError, NotFoundError
from tarefas_api.database.deps import get_db
from tarefas_api.models.assignment import Assignment
from tarefas_api.models.task import Task
from tarefas_api.models.user import User
from tarefas_api.routes.identifiers import TASK_ID_PREFIX, USER_ID_PREFIX, ensure_prefix
from tarefas_api.schemas.message import MessageOut
from tarefas_api.schemas.task import TaskOut, TaskWithResponsiblesOut
from tarefas_api.schemas.user import UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Assignments"])


def get_existing_pair(db: Session, task_id: str, user_id: str) -> tuple[Task, User]:
    ensure_prefix("taskId", task_id, TASK_ID_PREFIX)
    ensure_prefix("userId", user_id, USER_ID_PREFIX)

    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFoundError("'taskId' não encontrado")
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("'userId' não encontrado")
    return task, user


@router.get("/users", response_model=list[TaskWithResponsiblesOut])
def list_tasks_with_responsibles(db: Session = Depends(get_db)):
    rows = (
        db.query(Task, User)
        .outerjoin(Assignment, Assignment.task_id == Task.id)
        .outerjoin(User, User.id == Assignment.user_id)
        .all()
    )

    grouped: dict[str, TaskWithResponsiblesOut] = {}
    for task, user in rows:
        item = grouped.get(task.id)
        if item is None:
            item = TaskWithResponsiblesOut(**TaskOut.model_validate(task).model_dump())
            grouped[task.id] = item
        if user is not None:
            item.responsibles.append(UserOut.model_validate(user))
    return list(grouped.values())


@router.post("/{task_id}/users/{user_id}", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def assign_user(
    task_id: str,
    user_id: str,
    db: Session = Depends(get_db),
):
    get_existing_pair(db, task_id, user_id)
    db.add(Assignment(task_id=task_id, user_id=user_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Atribuição repetida: task=%s user=%s", task_id, user_id)
        raise ConflictError("User já atribuído à tarefa")
    return MessageOut(message="User atribuído à tarefa com sucesso")


@router.delete("/{task_id}/users/{user_id}", response_model=MessageOut)
def unassign_user(
    task_id: str,
    user_id: str,
    db: Session = Depends(get_db),
):
    get_existing_pair(db, task_id, user_id)
    db.query(Assignment).filter(
        Assignment.task_id == task_id,
        Assignment.user_id == user_id,
    ).delete()
    db.commit()
    return MessageOut(message="User removido da tarefa com sucesso")
