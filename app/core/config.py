from typing import List

from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "change-me"


class Settings(BaseSettings):
    project_name: str = "Personal Blog"
    api_version: str = "1.0.0"

    database_url: str = "sqlite+aiosqlite:///./blog.db"
    sql_echo: bool = False
    # Создавать таблицы при старте (для продакшена используйте alembic)
    create_schema: bool = True

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
