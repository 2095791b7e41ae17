"""HTTP server configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import int_env_var, optional_env_var
from .errors import ConfigurationError

DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 8000
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:  # noqa: PLR2004
            raise ConfigurationError(f"Port must be between 1 and 65535, got {self.port}")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


def get_server_config() -> ServerConfig:
    return ServerConfig(
        host=optional_env_var("ALBUMREST_HOST") or DEFAULT_HOST,
        port=int_env_var("ALBUMREST_PORT", DEFAULT_PORT),
        log_level=optional_env_var("ALBUMREST_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    )
