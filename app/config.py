"""
app/config.py — Central configuration loaded from environment variables.
All modules import settings from here; never read os.environ directly elsewhere.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Server ────────────────────────────────────────────────────────────────
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port the HTTP server listens on",
    )
    host: str = Field(default="0.0.0.0", description="Bind address for the HTTP server")
    log_level: str = Field(default="INFO", description="Root logging level")

    # ── HTTP ──────────────────────────────────────────────────────────────────
    cors_allow_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by CORS (JSON list in the environment)",
    )
    service_name: str = Field(
        default="lead-classifier",
        description="Service name reported by the liveness endpoints",
    )


# Singleton — import this everywhere
settings = Settings()
