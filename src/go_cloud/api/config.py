"""Service configuration management for the go-cloud API."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config(BaseSettings):
    """go-cloud service configuration.

    Built once at startup and attached to the application. Instances are
    frozen: handlers read the values but never change them, and nothing
    re-reads the process environment after construction.
    """

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore", "frozen": True}

    port: int = Field(default=8080, ge=0, le=65535, description="Listen port")
    app_ready: str = Field(default="", description="Readiness flag")
    host: str = Field(default="0.0.0.0", description="Listen address")
    log_level: str = Field(default="INFO", description="Logging level")
    shutdown_timeout: float = Field(
        default=5.0, gt=0, description="Seconds in-flight requests get to finish on shutdown"
    )
    readiness_delay_ms: int = Field(
        default=0, ge=0, description="Artificial delay before /readyz evaluates readiness"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def ready(self) -> bool:
        """Whether the service reports itself ready (APP_READY is "true", any case)."""
        return self.app_ready.lower() == "true"

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables and .env files."""
        return cls()
