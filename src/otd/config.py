"""Configuration management for otd."""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

APP_NAME = "otd-cli"
APP_VERSION = "1.0"

SOURCE_URL = "https://en.wikipedia.org/wiki/Wikipedia:On_this_day/Today"
DEFAULT_ORIGIN_URL = "https://github.com/gabezeck/otd-cli"
DEFAULT_CONTACT_EMAIL = "contact@example.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_ITEMS = 6


def user_cache_dir() -> Path:
    """Platform cache root: XDG on Linux, Library/Caches on macOS, LOCALAPPDATA on Windows."""
    if sys.platform == "win32":
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return Path(local)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches"
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".cache"


def default_cache_dir() -> Path:
    return user_cache_dir() / APP_NAME


@dataclass
class Config:
    """otd configuration."""

    origin_url: str = DEFAULT_ORIGIN_URL
    contact_email: str = DEFAULT_CONTACT_EMAIL
    source_url: str = SOURCE_URL
    cache_dir: Path = field(default_factory=default_cache_dir)
    timeout: float = DEFAULT_TIMEOUT
    max_items: int = DEFAULT_MAX_ITEMS

    @property
    def user_agent(self) -> str:
        """Wikipedia asks clients to identify themselves with contact info."""
        return f"{APP_NAME}/{APP_VERSION} ({self.origin_url}; {self.contact_email})"


def load_config(env_file: Path | str | None = None) -> Config:
    """
    Load configuration from the environment.

    A .env file (the given path, or .env in the working directory) is
    loaded first. It never overrides variables already set in the
    process environment. Unset, empty or out-of-range values keep their
    defaults.
    """
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env", override=False)

    config = Config()

    if value := _env("OTD_ORIGIN_URL"):
        config.origin_url = value
    if value := _env("OTD_CONTACT_EMAIL"):
        config.contact_email = value
    if value := _env("OTD_CACHE_DIR"):
        config.cache_dir = Path(value).expanduser()
    if value := _env("OTD_TIMEOUT"):
        try:
            timeout = float(value)
        except ValueError:
            timeout = None
        # requests rejects non-positive timeouts
        if timeout is not None and timeout > 0:
            config.timeout = timeout
        else:
            logger.warning(f"Invalid OTD_TIMEOUT {value!r}, using {DEFAULT_TIMEOUT}")
    if value := _env("OTD_MAX_ITEMS"):
        try:
            max_items = int(value)
        except ValueError:
            max_items = None
        if max_items is not None and max_items >= 0:
            config.max_items = max_items
        else:
            logger.warning(f"Invalid OTD_MAX_ITEMS {value!r}, using {DEFAULT_MAX_ITEMS}")

    return config


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()
