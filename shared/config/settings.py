import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError


class Settings(BaseModel):
    database_url: str = Field(
        default="sqlite+aiosqlite:///./inventory.db", alias="DATABASE_URL"
    )
    db_echo: bool = Field(default=False, alias="DB_ECHO")
    seed_sample_data: bool = Field(default=True, alias="SEED_SAMPLE_DATA")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    env: str = Field(default="local", alias="APP_ENV")
    service_name: str = Field(default="product_service", alias="SERVICE_NAME")
    # Tracing is only wired up when an OTLP collector is configured.
    otlp_endpoint: Optional[str] = Field(default=None, alias="OTLP_ENDPOINT")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def _load_dotenv():
    # Load from repo root if present, otherwise rely on environment variables.
    root_env = Path(__file__).resolve().parents[2] / ".env"
    if root_env.exists():
        load_dotenv(root_env)
    else:
        load_dotenv()


@lru_cache()
def get_settings() -> Settings:
    _load_dotenv()
    try:
        return Settings(**os.environ)
    except ValidationError as exc:
        invalid = [str(e["loc"][0]) for e in exc.errors()]
        detail = f"Invalid environment configuration: {', '.join(invalid)}"
        raise RuntimeError(detail) from exc
