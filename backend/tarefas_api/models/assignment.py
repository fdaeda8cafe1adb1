from sqlalchemy import Column, String
from tarefas_api.database.base import Base

class Assignment(Base):
    __tablename__ = "users_tasks"

    # Sem ForeignKey: a existência de task e user é verificada nas rotas.
    task_id = Column(String, primary_key=True)
    user_id = Column(String, primary_key=True, index=True)
