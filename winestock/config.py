# winestock/config.py
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str
    PORT: int = 3333

    # bcrypt cost factor used for every stored password
    PASSWORD_HASH_ROUNDS: int = 6

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    SQL_ECHO: bool = False

    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    ALLOWED_HOSTS: List[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding='utf-8', extra='ignore')


settings = Settings()
