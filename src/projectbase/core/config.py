from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Projectbase"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database (optional - the app starts without it and reports unavailability)
    database_url: str | None = None
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Sessions
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    session_cookie_name: str = "app_session_id"
    admin_session_cookie_name: str = "admin_session"
    admin_session_expire_days: int = 7

    # End users whose open id matches this value are promoted to admin on upsert
    owner_open_id: str | None = None

    # Password hashing
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    # REST facade
    rest_default_page_size: int = 100
    rest_max_page_size: int = 1000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("database_url")
    @classmethod
    def blank_database_url_is_unset(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
