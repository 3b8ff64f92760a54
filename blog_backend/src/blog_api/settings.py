from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Set

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}
_LOG_FORMATS = {"console", "json"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SEED_BLOG_POSTS: 'true' (default) to create sample posts when the app builds its own store
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: DEBUG, INFO (default), WARNING or ERROR
    - LOG_FORMAT: 'console' (default) or 'json'
    - API_HOST: bind host used by `blog-api` (default '0.0.0.0')
    - API_PORT: bind port used by `blog-api` (default 8080)
    """

    seed_blog_posts: bool
    cors_allow_origins: List[str]
    log_level: str
    log_format: str
    api_host: str
    api_port: int


_TRUE_FLAGS = {"1", "true", "yes", "on"}
_FALSE_FLAGS = {"0", "false", "no", "off"}


def _env(name: str) -> Optional[str]:
    """Return the stripped value of `name`, or None when it is unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or None


def _env_flag(name: str, default: bool) -> bool:
    value = (_env(name) or "").lower()
    if value in _TRUE_FLAGS:
        return True
    if value in _FALSE_FLAGS:
        return False
    return default


def _env_port(name: str, default: int) -> int:
    value = _env(name)
    if value is None or not value.isdigit() or not 0 < int(value) < 65536:
        return default
    return int(value)


def _env_choice(name: str, choices: Set[str], default: str, upper: bool = False) -> str:
    value = _env(name)
    if value is None:
        return default
    value = value.upper() if upper else value.lower()
    return value if value in choices else default


def _env_origins(name: str) -> List[str]:
    """
    CORS origins: unset or '*' allows every origin, otherwise a comma-separated list.
    """
    value = _env(name)
    if value is None or value == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        seed_blog_posts=_env_flag("SEED_BLOG_POSTS", True),
        cors_allow_origins=_env_origins("CORS_ALLOW_ORIGINS"),
        log_level=_env_choice("LOG_LEVEL", _LOG_LEVELS, "INFO", upper=True),
        log_format=_env_choice("LOG_FORMAT", _LOG_FORMATS, "console"),
        api_host=_env("API_HOST") or "0.0.0.0",
        api_port=_env_port("API_PORT", 8080),
    )
