# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./termoflexpro.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # Target file for generate_sql_schema.py
    SCHEMA_OUTPUT: str = "termoflexpro_schema.sql"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
