import os
from typing import List
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _database_url() -> str:
    # DefaultConnection wins; DATABASE_URL / DB_URL kept for hosted Postgres
    return (
        os.getenv("DEFAULT_CONNECTION")
        or os.getenv("DATABASE_URL")
        or os.getenv("DB_URL")
        or "sqlite:///./products.db"
    )


class Settings(BaseModel):
    app_env: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Relational store
    database_url: str = _database_url()
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    db_echo: bool = os.getenv("DB_ECHO", "0") == "1"

    # CORS: comma-separated, "*" allows every origin
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        return origins or ["*"]

    @property
    def docs_enabled(self) -> bool:
        return self.app_env == "dev"


settings = Settings()
