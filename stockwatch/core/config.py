"""Process configuration for the reporter."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Settings passed to the reporter and log sink at construction."""

    stock_status_url: Optional[str] = None
    log_level: str = "info"
    push_timeout: float = 30.0
    stores_config_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file, if any)."""
        load_dotenv()

        url = os.getenv("SSURL") or None
        if url:
            url = url.rstrip("/")

        return cls(
            stock_status_url=url,
            log_level=os.getenv("LOG_LEVEL", "info"),
            push_timeout=float(os.getenv("SSURL_TIMEOUT", "30")),
            stores_config_dir=os.getenv("STORES_CONFIG_DIR") or None,
        )
