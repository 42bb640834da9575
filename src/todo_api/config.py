import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./todo.db")
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Cache
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "todo-api")
    cache_list_ttl: int = int(os.getenv("CACHE_LIST_TTL", "300"))  # 5 minutes
    cache_timeout: float = float(os.getenv("CACHE_TIMEOUT", "5"))

    # JWT
    jwt_secret_key: str = os.getenv("JWT_SECRET_KEY", "change-me-in-production")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    jwt_issuer: str = os.getenv("JWT_ISSUER", "todo-api")
    access_token_expire_hours: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "24"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_list_ttl <= 0:
            raise ValueError("CACHE_LIST_TTL must be a positive number of seconds")

        if self.cache_timeout <= 0:
            raise ValueError("CACHE_TIMEOUT must be a positive number of seconds")

        if self.access_token_expire_hours <= 0:
            raise ValueError("ACCESS_TOKEN_EXPIRE_HOURS must be positive")

        if self.jwt_algorithm not in ["HS256", "HS384", "HS512"]:
            raise ValueError(
                f"JWT_ALGORITHM must be one of [HS256, HS384, HS512], got {self.jwt_algorithm}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance.

    Every command is bounded by ``cache_timeout`` regardless of what the
    caller is doing.
    """
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
        socket_timeout=settings.cache_timeout,
        socket_connect_timeout=settings.cache_timeout,
    )


def get_engine(url: str | None = None) -> Engine:
    """Create a SQLAlchemy engine for the configured database."""
    url = url or settings.database_url
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
        )
    return create_engine(url, echo=settings.database_echo, pool_pre_ping=True)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
