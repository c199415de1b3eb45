"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.port: int = _port(os.getenv("PORT", "8000"))
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Upstream comic origin
        self.xkcd_base_url: str = os.getenv("XKCD_BASE_URL", "https://xkcd.com").rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


settings = Settings()
