from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Tips Front-Matter API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:4000"]

    # Article corpus (relative to the working directory)
    content_dir: str = "content"
    content_glob: str = "**/*.md"

    # Reject front-matter keys outside the known article fields
    strict_keys: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_parser: str = "WARNING"        # front-matter codec
    log_level_pipeline: str = "INFO"         # corpus load / validation runs

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "env_prefix": "TIPSDOC_",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
