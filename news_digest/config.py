from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from .exceptions import ConfigError
from .fetcher import DEFAULT_SEARCH_ENDPOINT
from .summarizers import DEFAULT_GENERATION_ENDPOINT


@dataclass(frozen=True)
class Config:
    """
    Everything the pipeline reads from the outside world.

    Passed explicitly into NewsDigest so tests can build one by hand instead
    of touching the process environment.
    """
    client_id: str = ""
    client_secret: str = ""
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    keyword: str = "AI"
    output_dir: str = "news"
    timezone: str = "Asia/Seoul"
    timeout_sec: float = 15.0
    log_level: str = "INFO"
    search_endpoint: str = DEFAULT_SEARCH_ENDPOINT
    generation_endpoint: str = DEFAULT_GENERATION_ENDPOINT

    def missing_credentials(self) -> List[str]:
        missing = []
        if not self.client_id:
            missing.append("CLIENT_ID")
        if not self.client_secret:
            missing.append("CLIENT_SECRET")
        if not self.gemini_api_key:
            missing.append("GEMINI_KEY")
        return missing

    def validate(self) -> None:
        missing = self.missing_credentials()
        if missing:
            raise ConfigError(f"Missing environment variables: {', '.join(missing)}. Check your .env file.")


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"NEWS_TIMEZONE must be an IANA time zone, got {name!r}") from e


def _timezone(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name) or default
    resolve_timezone(value)
    return value


def config_from_env(env: Mapping[str, str]) -> Config:
    return Config(
        client_id=env.get("CLIENT_ID", ""),
        client_secret=env.get("CLIENT_SECRET", ""),
        gemini_api_key=env.get("GEMINI_KEY") or env.get("GEMINI_API_KEY", ""),
        gemini_model=env.get("GEMINI_MODEL") or "gemini-2.0-flash",
        output_dir=env.get("NEWS_OUTPUT_DIR") or "news",
        timezone=_timezone(env, "NEWS_TIMEZONE", "Asia/Seoul"),
        timeout_sec=_float(env, "HTTP_TIMEOUT", 15.0),
        log_level=env.get("LOG_LEVEL") or "INFO",
    )


def load_config(env_file: Optional[str] = ".env") -> Config:
    """Load .env (real environment variables win) and build a Config from os.environ."""
    if env_file:
        load_dotenv(env_file)
    return config_from_env(os.environ)
