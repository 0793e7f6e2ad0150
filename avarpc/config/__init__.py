"""Configuration loading and validation."""

from avarpc.config.loader import load_config
from avarpc.config.schema import Config, LoggingConfig, NodeConfig

__all__ = [
    "Config",
    "LoggingConfig",
    "NodeConfig",
    "load_config",
]
