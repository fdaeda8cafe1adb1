from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from tarefas_api.core.config import DATABASE_URL

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL nao configurada. Defina a variavel de ambiente antes de iniciar a API.")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # Sessões são usadas pelas threads do worker pool do FastAPI.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
