"""Engine settings and logging configuration."""

from usecase_engine.config.logging import configure_logging
from usecase_engine.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
