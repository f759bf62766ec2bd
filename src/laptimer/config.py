"""Server settings via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_cors_origins(raw: str) -> list[str]:
    """Split a comma-separated origins string, dropping blanks."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Settings(BaseSettings):
    """Timing server configuration.

    Values come from ``LAPTIMER_*`` environment variables, falling back to a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="LAPTIMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    host: str = "0.0.0.0"
    port: int = 3000

    # JSON file shaped like {team: {"color": ..., "drivers": [...]}};
    # the built-in 2024 grid is used when unset
    roster_file: str | None = None

    log_dir: str = "logs"
    log_level: str = "INFO"

    # comma-separated; ESP32 gate controllers connect from arbitrary LAN addresses
    cors_origins_raw: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        return _parse_cors_origins(self.cors_origins_raw)
