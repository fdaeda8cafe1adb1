from sqlalchemy import Column, Integer, String, text
from tarefas_api.database.base import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    created_at = Column(String, nullable=False, server_default=text("CURRENT_TIMESTAMP"))
    # 0 = incompleta, 1 = completa
    status = Column(Integer, nullable=False, server_default=text("0"))
