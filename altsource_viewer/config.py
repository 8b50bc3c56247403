"""Configuration management for altsource-viewer."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "")
    return float(value) if value else None


class Config:
    """Application configuration from environment variables."""

    # Feed
    SOURCE_URL: str = os.getenv("ALTSOURCE_URL", "https://apps.altstore.io")
    FEED_TIMEOUT: Optional[float] = _optional_float("ALTSOURCE_FEED_TIMEOUT")  # None = wait forever

    # Install deep link: <scheme>://install?url=<downloadURL>
    INSTALL_URL_SCHEME: str = os.getenv("ALTSOURCE_INSTALL_SCHEME", "altstore")

    # Display
    DEFAULT_TINT_COLOR: str = "#8E8E93"
    DESCRIPTION_CLAMP_LINES: int = 3
    CHARS_PER_LINE: int = 60
    NAV_TITLE_THRESHOLD: int = 72  # px from the top where the app name leaves the view
    BOOTSTRAP_ICONS_CSS: str = (
        "https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css"
    )

    LOG_LEVEL: str = os.getenv("ALTSOURCE_LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> list[str]:
        """Validate required configuration. Returns list of missing keys."""
        required = ["SOURCE_URL"]
        missing = [key for key in required if not getattr(cls, key)]
        return missing


config = Config()
