from pydantic import Field, field_validator, ValidationInfo
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from typing import Annotated, Optional, List
import os
from urllib.parse import quote


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

    # Project information
    PROJECT_NAME: str = "Travel Planner"
    API_PREFIX: str = "/api"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Security
    SECRET_KEY: str = os.getenv(
        "JWT_SECRET_KEY", "change_this_to_a_long_random_string_in_production"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24 hours
    ALGORITHM: str = "HS256"
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", 12))

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v):
        if v == "change_this_to_a_long_random_string_in_production":
            # Allow the default in development mode only
            if os.getenv("ENVIRONMENT", "development") == "production":
                raise ValueError("Secret key must be changed in production")
        elif len(v) < 32:
            raise ValueError("Secret key should be at least 32 characters long")
        return v

    # Database
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", 5432))
    DB_USER: str = os.getenv("DB_USER", "username")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")
    DB_NAME: str = os.getenv("DB_NAME", "travel_planner")
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    SEED_SAMPLE_DATA: bool = True

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_url(cls, v, info: ValidationInfo):
        if v:
            return v

        values = info.data
        return f"postgresql://{values['DB_USER']}:{quote(values['DB_PASSWORD'])}@{values['DB_HOST']}:{values['DB_PORT']}/{values['DB_NAME']}"

    # Redis (rate limiting)
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", 6379))
    REDIS_PASSWORD: Optional[str] = os.getenv("REDIS_PASSWORD")
    REDIS_DB: int = int(os.getenv("REDIS_DB", 0))

    # Rate limits: 100 API calls and 10 auth attempts per 15 minutes
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_SECONDS: int = 15 * 60
    RATE_LIMIT_TIMES: int = 100
    AUTH_RATE_LIMIT_TIMES: int = 10

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str] | str:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Python client
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000")
    CLIENT_TIMEOUT_SECONDS: float = 10.0


settings = Settings()
