"""
ChefIQ Analyzer - Configuration and settings.

The analyzer itself is pure; settings only affect logging and which
appliance catalog is used.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyzerSettings(BaseSettings):
    """Settings read from the environment (and .env)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    chefiq_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # JSON list of appliances replacing the built-in catalog
    appliance_catalog_path: Path | None = None

    # LOG_REASONING=1 - debug-log each analysis reasoning trace
    log_reasoning: bool = False

    @property
    def is_development(self) -> bool:
        return self.chefiq_env == "development"

    @property
    def is_production(self) -> bool:
        return self.chefiq_env == "production"


@lru_cache
def get_settings() -> AnalyzerSettings:
    """Get cached settings instance."""
    return AnalyzerSettings()


class _SettingsProxy:
    """Lazy proxy so importing this module never reads the environment."""

    _instance: AnalyzerSettings | None = None

    def __getattr__(self, name: str):
        if self._instance is None:
            self._instance = get_settings()
        return getattr(self._instance, name)


settings = _SettingsProxy()
