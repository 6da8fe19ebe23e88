"""Environment-driven settings for the default dispatcher.

Reads SINKLOG_* environment variables and an optional ``.env`` file.
Nothing here is applied automatically; call ``sinklog.configure_from_env()``
to push these settings into the default dispatcher.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from sinklog.models.config import Formatter, LogConfig
from sinklog.models.severity import DEFAULT_LEVEL_PRIORITY


class SinklogSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SINKLOG_ENVIRONMENT=staging
        export SINKLOG_MIN_LEVEL=2
        export SINKLOG_ISOLATE_SINK_ERRORS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SINKLOG_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    service: str = "app"

    # Global threshold, compared against DEFAULT_LEVEL_PRIORITY
    min_level: int = 1

    isolate_sink_errors: bool = False

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"

    @property
    def context(self) -> dict[str, Any]:
        """The global context handed to formatters."""
        return {"environment": self.environment, "service": self.service}

    def to_log_config(self, formatter: Formatter | None = None) -> LogConfig:
        """Build a ``LogConfig`` from these settings and the default priorities."""
        return LogConfig(
            min_level=self.min_level,
            level_priority=dict(DEFAULT_LEVEL_PRIORITY),
            formatter=formatter,
        )
