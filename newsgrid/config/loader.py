"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import ConfigModel

logger = logging.getLogger(__name__)


def default_config_path() -> Path:
    """Location of the user configuration file."""
    return Path.home() / ".config" / "newsgrid" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager.

        An explicit ``config_path`` must exist; only the default location may be
        absent, in which case defaults apply.
        """
        self.explicit_path = config_path is not None
        if config_path is None:
            config_path = default_config_path()
        self.config_path = Path(config_path)
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            elif self.explicit_path:
                raise ConfigError(f"Config file not found: {self.config_path}")
            else:
                logger.debug("No config file at %s, using defaults", self.config_path)
                self._config = ConfigModel()
        return self._config

    def get_feed_api_key(self) -> str:
        """Resolve the feed credential, environment first."""
        feed = self.config.feed
        if feed.api_key_env:
            api_key = os.environ.get(feed.api_key_env)
            if api_key:
                return api_key
        return feed.api_key or ""

    def get_llm_config(self) -> Dict[str, Any]:
        """Get LLM configuration dict."""
        llm_config = self.config.llm.model_dump()

        # Handle API key from environment if specified
        if llm_config.get("api_key_env"):
            api_key = os.environ.get(llm_config["api_key_env"])
            if api_key:
                llm_config["api_key"] = api_key

        return llm_config


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    except TypeError as e:
        raise ConfigError(f"Config file must contain a mapping: {e}") from e


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
