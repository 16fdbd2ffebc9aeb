"""Configuration management via .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

THEMES = ("dark", "light")


def _xdg_data_home() -> Path:
    return Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def _xdg_config_home() -> Path:
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AppConfig:
    # Paths
    data_dir: Path = field(default_factory=lambda: _xdg_data_home() / "manhwa")
    config_dir: Path = field(default_factory=lambda: _xdg_config_home() / "manhwa")
    db_path: Path = field(init=False)

    # Content provider; empty base URL means the in-process provider
    api_base_url: str = ""
    request_timeout: float = 10.0
    cache_series: bool = True

    # Appearance
    default_theme: str = "dark"

    # `manhwa serve`
    serve_host: str = "127.0.0.1"
    serve_port: int = 8000

    log_path: Path = field(init=False)

    def __post_init__(self) -> None:
        self.db_path = self.data_dir / "manhwa.db"
        self.log_path = self.data_dir / "manhwa.log"
        if self.default_theme not in THEMES:
            self.default_theme = "dark"
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_dir.mkdir(parents=True, exist_ok=True)

    @property
    def uses_remote_provider(self) -> bool:
        return bool(self.api_base_url.strip())


def load_config(env_path: Optional[Path] = None) -> AppConfig:
    """Load config from .env file. Searches CWD then config dir."""
    search_paths = [
        env_path,
        Path.cwd() / ".env",
        _xdg_config_home() / "manhwa" / ".env",
        Path.home() / ".env",
    ]
    for p in search_paths:
        if p and p.exists():
            load_dotenv(p)
            break

    defaults = AppConfig()

    try:
        timeout = float(os.getenv("MANHWA_REQUEST_TIMEOUT", defaults.request_timeout))
    except ValueError:
        timeout = defaults.request_timeout

    try:
        port = int(os.getenv("MANHWA_PORT", defaults.serve_port))
    except ValueError:
        port = defaults.serve_port

    return AppConfig(
        api_base_url=os.getenv("MANHWA_API_BASE_URL", defaults.api_base_url),
        request_timeout=timeout,
        cache_series=_env_bool("MANHWA_CACHE_SERIES", defaults.cache_series),
        default_theme=os.getenv("MANHWA_THEME", defaults.default_theme).lower(),
        serve_host=os.getenv("MANHWA_HOST", defaults.serve_host),
        serve_port=port,
    )
