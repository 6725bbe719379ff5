"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

CONFIG_ENV = "BLOGSTORE_CONFIG"


def default_config_path() -> Path:
    """Config path used when none is given explicitly."""
    return Path.home() / ".config" / "blogstore" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        # An explicitly named config file must exist; the default one may not.
        self.explicit = True
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV)
            if env_path:
                config_path = Path(env_path).expanduser()
            else:
                config_path = default_config_path()
                self.explicit = False
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config."""
        if self._config is None:
            if not self.explicit and not self.config_path.exists():
                self._config = ConfigModel()
            else:
                self._config = load_config(self.config_path)
        return self._config

    @property
    def content_root(self) -> Path:
        """Get content root path."""
        return Path(self.config.content_root).expanduser()


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")
    except TypeError as e:
        raise ValueError(f"Invalid configuration: expected a mapping ({e})")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
