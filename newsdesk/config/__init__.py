"""Configuration management for newsdesk."""

from .loader import DEFAULT_CONFIG_PATH, Config, load_config, save_config
from .models import ApiConfig, ConfigModel, LoggingConfig, SeedConfig, ServerConfig

__all__ = [
    "ApiConfig",
    "Config",
    "ConfigModel",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "SeedConfig",
    "ServerConfig",
    "load_config",
    "save_config",
]
