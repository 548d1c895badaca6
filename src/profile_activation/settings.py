from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "WARNING"
    profiles_file: Optional[str] = None
    # Expose the process environment as env.* system properties
    expose_environment: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            profiles_file=os.getenv("PROFILES_FILE"),
            expose_environment=os.getenv("EXPOSE_ENVIRONMENT", "true").lower() in ("true", "1", "yes"),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
