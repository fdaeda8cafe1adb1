from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tarefas_api.core.errors import ConflictError, NotFoundError
from tarefas_api.database.deps import get_db
from tarefas_api.models.assignment import Assignment
from tarefas_api.models.user import User
from tarefas_api.routes.identifiers import USER_ID_PREFIX, ensure_prefix
from tarefas_api.routes.payloads import payload_or_empty
from tarefas_api.schemas.message import MessageOut
from tarefas_api.schemas.user import UserCreate, UserCreatedOut, UserOut

router = APIRouter(prefix='/users', tags=['Users'])


@router.get('', response_model=list[UserOut])
def list_users(
    q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(User)
    if q is not None:
        query = query.filter(User.name.like(f'%{q}%'))
    return query.all()


@router.post('', response_model=UserCreatedOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Optional[UserCreate] = None,
    db: Session = Depends(get_db),
):
    payload = payload_or_empty(payload, UserCreate)
    if db.query(User).filter(User.id == payload.id).first():
        raise ConflictError("'id' já existe")
    if db.query(User).filter(User.email == payload.email).first():
        raise ConflictError("'email' já existe")

    user = User(
        id=payload.id,
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return UserCreatedOut(message='User criado com sucesso', user=UserOut.model_validate(user))


@router.delete('/{user_id}', response_model=MessageOut)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
):
    ensure_prefix('id', user_id, USER_ID_PREFIX)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("'id' não encontrado")
    db.query(Assignment).filter(Assignment.user_id == user_id).delete()
    db.delete(user)
    db.commit()
    return MessageOut(message='User deletado com sucesso')
