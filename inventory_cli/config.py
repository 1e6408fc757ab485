# inventory_cli/config.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration, read from the environment or a local `.env` file.

    The database can be given either as one SQLAlchemy URL (DATABASE_URL) or
    as separate DB_* pieces. The full URL wins when both are present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Database ---
    database_url: Optional[str] = Field(default=None, validation_alias="DATABASE_URL")

    db_dialect: str = Field(default="mysql+pymysql", validation_alias="DB_DIALECT")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="inventorydb", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: Optional[str] = Field(default=None, validation_alias="DB_PASSWORD")

    # --- Logging ---
    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")

    @property
    def database_url_resolved(self) -> str:
        """DATABASE_URL if set, otherwise built from the DB_* pieces."""
        if self.database_url and self.database_url.strip():
            return self.database_url.strip()

        user = quote_plus(self.db_user)
        pwd = quote_plus(self.db_password or "")
        return f"{self.db_dialect}://{user}:{pwd}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
