"""Client Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (password) come from environment variables or .env, never hardcoded
    - get_settings() is cached (lru_cache), one instance per process
    - url never ends with "/"

Design Decisions:
    - pydantic-settings over raw os.environ: typed env parsing with .env support
    - MODELRPC_ prefix: the client is embedded in host apps with their own env vars
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Connection and logging settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODELRPC_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # Server
    url: str = "http://localhost:8069"

    @field_validator("url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Credentials
    db: str = ""
    uid: int = 0
    password: str = Field(default="", repr=False)

    # Locale sent with search/search_read (unset = no context)
    lang: str | None = None

    # Transport
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = "modelrpc/0.1"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
