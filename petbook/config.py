from functools import lru_cache
from pydantic import BaseModel
import os
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "PetBook")
    env: str = os.getenv("APP_ENV", "dev")
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "PetBook")
    collection_name: str = os.getenv("COLLECTION_NAME", "Pets")
    mongodb_timeout_ms: int = int(os.getenv("MONGODB_TIMEOUT_MS", "30000"))
    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:5173")
    rate_limit: str = os.getenv("RATE_LIMIT", "120/minute")
    rate_limit_enabled: bool = _flag("RATE_LIMIT_ENABLED", "true")
    # True: cuerpos JSON ilegibles se ignoran como hacía la versión original
    lenient_body_parsing: bool = _flag("LENIENT_BODY_PARSING", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
