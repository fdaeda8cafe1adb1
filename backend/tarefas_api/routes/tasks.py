from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from tarefas_api.core.errors import ConflictError, NotFoundError
from tarefas_api.database.deps import get_db
from tarefas_api.models.assignment import Assignment
from tarefas_api.models.task import Task
from tarefas_api.routes.identifiers import TASK_ID_PREFIX, ensure_prefix
from tarefas_api.routes.payloads import payload_or_empty
from tarefas_api.schemas.message import MessageOut
from tarefas_api.schemas.task import TaskCreate, TaskOut, TaskSavedOut, TaskUpdate

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"]
)

@router.get("", response_model=list[TaskOut])
def read_tasks(
    q: Optional[str] = None,
    db: Session = Depends(get_db)
):
    query = db.query(Task)
    if q is not None:
        pattern = f"%{q}%"
        query = query.filter(or_(Task.title.like(pattern), Task.description.like(pattern)))
    return query.all()

@router.post("", response_model=TaskSavedOut, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: Optional[TaskCreate] = None,
    db: Session = Depends(get_db)
):
    payload = payload_or_empty(payload, TaskCreate)
    if db.query(Task).filter(Task.id == payload.id).first():
        raise ConflictError("'id' já existe")
    db_task = Task(
        id=payload.id,
        title=payload.title,
        description=payload.description
    )
    db.add(db_task)
    db.commit()
    # Relê a linha para trazer created_at e status preenchidos pelo banco.
    db.refresh(db_task)
    return TaskSavedOut(message="Task criada com sucesso", task=TaskOut.model_validate(db_task))

@router.put("/{task_id}", response_model=TaskSavedOut)
def update_task(
    task_id: str,
    payload: Optional[TaskUpdate] = None,
    db: Session = Depends(get_db)
):
    data = payload_or_empty(payload, TaskUpdate).model_dump(exclude_unset=True)
    db_task = db.query(Task).filter(Task.id == task_id).first()
    if not db_task:
        raise NotFoundError("'id' não encontrada")

    new_id = data.get("id", task_id)
    if new_id != task_id:
        if db.query(Task).filter(Task.id == new_id).first():
            raise ConflictError("'id' já existe")
        db.query(Assignment).filter(Assignment.task_id == task_id).update(
            {Assignment.task_id: new_id}, synchronize_session=False
        )

    for key, value in data.items():
        setattr(db_task, key, value)
    db.commit()
    db.refresh(db_task)
    return TaskSavedOut(message="Task editada com sucesso", task=TaskOut.model_validate(db_task))

@router.delete("/{task_id}", response_model=MessageOut)
def delete_task(
    task_id: str,
    db: Session = Depends(get_db)
):
    ensure_prefix("id", task_id, TASK_ID_PREFIX)
    db_task = db.query(Task).filter(Task.id == task_id).first()
    if not db_task:
        raise NotFoundError("'id' não encontrado")
    db.query(Assignment).filter(Assignment.task_id == task_id).delete()
    db.delete(db_task)
    db.commit()
    return MessageOut(message="Task deletada com sucesso")
