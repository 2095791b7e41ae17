"""Application configuration helpers."""

from __future__ import annotations

from .env import int_env_var, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .server import ServerConfig, get_server_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "ServerConfig",
    "StorageConfig",
    "configure_logging",
    "get_database_config",
    "get_server_config",
    "get_storage_config",
    "int_env_var",
    "optional_env_var",
]
