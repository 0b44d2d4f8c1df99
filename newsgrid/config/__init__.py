"""Configuration management for newsgrid."""

from .loader import Config, default_config_path, load_config, save_config
from .models import ConfigModel, FeedConfig, FetchConfig, LLMConfig, PipelineConfig

__all__ = [
    "Config",
    "ConfigModel",
    "FeedConfig",
    "FetchConfig",
    "LLMConfig",
    "PipelineConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
