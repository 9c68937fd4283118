from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from typing import Optional, Any
from pathlib import Path


class Settings(BaseSettings):
    PROJECT_NAME: str = "Student Registry"

    # Database settings
    # By default, use SQLite for development, but allow override via env var
    DB_TYPE: str = "sqlite"

    # SQLite settings
    SQLITE_DB_PATH: str = "sqlite:///./app.db"

    # PostgreSQL settings
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    SQLALCHEMY_DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)
    SQL_ECHO: bool = False

    # View settings
    TEMPLATES_DIR: str = str(Path(__file__).resolve().parent.parent / "templates")

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

    @field_validator("SQLALCHEMY_DATABASE_URI", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str):
            return v
        values = info.data
        if values.get("DB_TYPE") == "postgres":
            url = URL.create(
                "postgresql",
                username=values.get("POSTGRES_USER"),
                password=values.get("POSTGRES_PASSWORD"),
                host=values.get("POSTGRES_SERVER"),
                database=values.get("POSTGRES_DB"),
            )
            # credentials are percent-escaped in the rendered URI
            return url.render_as_string(hide_password=False)
        # Default to SQLite
        return values.get("SQLITE_DB_PATH")


settings = Settings()
