"""
Configuration for the Benkyou API.

Defaults can be overridden with environment variables:

- BENKYOU_HOST          Interface to bind to. Default: "0.0.0.0"
- BENKYOU_PORT          TCP port. Default: 8000
- BENKYOU_CORS_ORIGINS  Comma-separated allowed origins, "*" for all. Default: "*"
- BENKYOU_LOG_LEVEL     Logging level name (DEBUG, INFO, ...). Default: "INFO"
- BENKYOU_RELOAD        "1", "true", "yes" or "on" enables uvicorn reload. Default: false

Typical usage::

    from config import configure_logging, get_config

    cfg = get_config()
    configure_logging(cfg.log_level)
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

ENV_PREFIX = "BENKYOU_"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ApiConfig:
    """Configuration values for the HTTP layer."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    reload: bool = False

    @property
    def allow_all_cors(self) -> bool:
        return "*" in self.cors_origins


def _env(name: str) -> str | None:
    value = os.environ.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_bool(value: str) -> bool:
    return value.lower() in _TRUE_VALUES


def _parse_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_config() -> ApiConfig:
    """Build an :class:`ApiConfig` from the environment.

    Raises:
        ValueError: If BENKYOU_PORT is not an integer
    """
    cfg = ApiConfig()

    if (host := _env("HOST")) is not None:
        cfg.host = host
    if (port := _env("PORT")) is not None:
        try:
            cfg.port = int(port)
        except ValueError as e:
            raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port!r}") from e
    if (origins := _env("CORS_ORIGINS")) is not None:
        cfg.cors_origins = _parse_origins(origins) or ["*"]
    if (level := _env("LOG_LEVEL")) is not None:
        cfg.log_level = level.upper()
    if (reload := _env("RELOAD")) is not None:
        cfg.reload = _parse_bool(reload)

    return cfg


@lru_cache(maxsize=1)
def get_config() -> ApiConfig:
    """Process-wide configuration, read once."""
    return load_config()


def configure_logging(level: str | int = "INFO") -> None:
    """Set up root logging once for the service.

    Unknown level names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
