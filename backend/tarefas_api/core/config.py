from dotenv import load_dotenv
import os

load_dotenv()  # Carrega variáveis do .env

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tarefas.db")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX") or None
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 3003))
DB_BOOTSTRAP_MODE = str(os.getenv("DB_BOOTSTRAP_MODE", "sync") or "sync").strip().lower()

def parse_cors_origins(value: str):
    if not value:
        return []
    if value.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]
