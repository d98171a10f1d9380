from typing import List, Union
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "Inkwell"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Blogging platform API: posts, comments, likes and bookmarks"
    API_PREFIX: str = ""

    # Session tokens are issued by the identity provider; we only verify them
    SECRET_KEY: str = "your-secret-key-here"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_COOKIE_NAME: str = "access_token"

    # Database - prefer discrete Postgres settings; fallback to DATABASE_URL
    DATABASE_URL: str = ""
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "inkwell"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DATABASE_DIALECT: str = "postgresql+asyncpg"
    DATABASE_ECHO: bool = False

    # Migrations
    AUTO_MIGRATE_ON_STARTUP: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Posts
    WORDS_PER_MINUTE: int = 200

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)


settings = Settings()


def get_database_url() -> str:
    """Assemble the async database URL from settings."""
    if settings.DATABASE_URL:
        url = settings.DATABASE_URL
    else:
        user = quote_plus(settings.POSTGRES_USER or "")
        password = quote_plus(settings.POSTGRES_PASSWORD or "")
        if password:
            cred = f"{user}:{password}@"
        elif user:
            cred = f"{user}@"
        else:
            cred = ""
        url = (
            f"{settings.DATABASE_DIALECT}://{cred}"
            f"{settings.POSTGRES_HOST}:{settings.POSTGRES_PORT}/{settings.POSTGRES_DB}"
        )

    # The app always talks to Postgres through asyncpg
    if url.startswith("postgresql+psycopg2://"):
        url = url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url
