"""Process configuration read from the environment."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Collector settings.

    The pool defaults keep a single persistent connection to the proxy
    console: one idle, one open, no lifetime limit.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
    )

    ODYSSEY_ADDRESS: str = Field(
        default="host=localhost user=postgres sslmode=disable",
        description="libpq keyword string or postgres:// URL of the proxy console",
        min_length=1,
    )
    ODYSSEY_OUTPUT_ADDRESS: str = Field(
        default="",
        description="Overrides the sanitized address in the server tag",
    )
    ODYSSEY_MAX_IDLE: int = Field(default=1, ge=1, description="Idle connections kept open")
    ODYSSEY_MAX_OPEN: int = Field(default=1, ge=1, description="Maximum open connections")
    ODYSSEY_MAX_LIFETIME: float = Field(
        default=0.0,
        ge=0.0,
        description="Connection lifetime in seconds, 0 for unlimited",
    )
    ODYSSEY_CONNECT_TIMEOUT: float = Field(
        default=5.0,
        gt=0.0,
        description="Seconds to wait for a pooled connection",
    )

    POLL_INTERVAL: float = Field(default=10.0, gt=0.0)
    GATHER_TIMEOUT: float = Field(default=30.0, gt=0.0)

    METRICS_HOST: str = "0.0.0.0"
    METRICS_PORT: int = Field(default=9127, ge=0, le=65535)

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL.upper()


settings = Settings()
