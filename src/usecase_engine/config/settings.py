"""Engine-wide settings read from ``USECASE_*`` environment variables.

Per-use-case behaviour is configured through ``UseCase`` keyword arguments;
these settings only cover the ambient concerns shared by every use case.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level engine settings.

    Attributes:
        verbose: Emit DEBUG-level engine logs.
        log_json: Render logs as JSON lines instead of console output.
        log_audits: Log a summary line for every completed audit.
    """

    model_config = SettingsConfigDict(env_prefix="USECASE_", frozen=True)

    verbose: bool = False
    log_json: bool = False
    log_audits: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
