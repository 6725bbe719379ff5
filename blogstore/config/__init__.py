"""Configuration management for blogstore."""

from .loader import CONFIG_ENV, Config, default_config_path, load_config, save_config
from .models import ConfigModel

__all__ = [
    "CONFIG_ENV",
    "Config",
    "ConfigModel",
    "default_config_path",
    "load_config",
    "save_config",
]
