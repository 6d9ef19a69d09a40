"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the store works out-of-the-box with a local file

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - TALENTFLOW_ prefix: the store is embedded in a host app and must not clash with its env
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Store settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="TALENTFLOW_", case_sensitive=False,
    )

    # Storage
    database_url: str = "sqlite+aiosqlite:///talentflow.db"
    database_echo: bool = False
    store_name: str = "TalentFlowDB"
    transaction_timeout_seconds: float = Field(30.0, gt=0)

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Jobs
    slug_max_attempts: int = Field(1000, ge=1)

    # Seeding
    seed_on_startup: bool = True
    seed_random_seed: int | None = None
    seed_job_count: int = Field(25, ge=0)
    seed_candidate_count: int = Field(1000, ge=0)
    seed_assessment_job_count: int = Field(5, ge=0)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
