import logging
import threading

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from tarefas_api.routes import assignments, tasks, users
from tarefas_api.core.error_handlers import register_error_handlers
from tarefas_api.database.base import Base
from tarefas_api.database.deps import get_db
from tarefas_api.database.session import engine
from tarefas_api.models import User
from tarefas_api.core.config import (
    APP_HOST,
    APP_PORT,
    CORS_ORIGINS,
    CORS_ORIGIN_REGEX,
    DB_BOOTSTRAP_MODE,
    parse_cors_origins,
)
from tarefas_api.schemas.message import MessageOut

logger = logging.getLogger("uvicorn.error")
app = FastAPI(title="Gestão de Tarefas")

cors_origins = parse_cors_origins(CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=CORS_ORIGIN_REGEX,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.middleware("http")
async def ensure_utf8_json_charset(request: Request, call_next):
    response = await call_next(request)
    content_type = str(response.headers.get("content-type", ""))
    if content_type.startswith("application/json") and "charset=" not in content_type.lower():
        response.headers["content-type"] = "application/json; charset=utf-8"
    return response


register_error_handlers(app)


def run_db_bootstrap() -> None:
    try:
        Base.metadata.create_all(bind=engine)
    except Exception:  # pragma: no cover - startup hardening
        logger.exception("Falha ao criar as tabelas no bootstrap do banco")


_bootstrap_lock = threading.Lock()
_bootstrap_started = False


def trigger_db_bootstrap(mode: str = DB_BOOTSTRAP_MODE) -> None:
    global _bootstrap_started
    with _bootstrap_lock:
        if _bootstrap_started:
            return
        _bootstrap_started = True

    if mode == "off":
        logger.info("DB bootstrap desativado (DB_BOOTSTRAP_MODE=off).")
        return
    if mode == "background":
        logger.info("Executando DB bootstrap em background.")
        threading.Thread(target=run_db_bootstrap, daemon=True, name="db-bootstrap").start()
        return

    logger.info("Executando DB bootstrap em modo sincronizado.")
    run_db_bootstrap()


app.include_router(assignments.router)
app.include_router(tasks.router)
app.include_router(users.router)


@app.get("/ping", response_model=MessageOut)
def ping(db: Session = Depends(get_db)):
    db.query(User).first()
    return MessageOut(message="Pong!")


@app.on_event("startup")
def startup_event():
    trigger_db_bootstrap()


if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
