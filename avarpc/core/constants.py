"""Core constants and paths for avarpc.

Single source of truth for global paths and node defaults.
"""

from pathlib import Path

AVARPC_DIR_NAME = ".avarpc"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9650
DEFAULT_PROTOCOL = "http"
DEFAULT_TIMEOUT = 30.0
DEFAULT_API_KEY_ENV = "AVARPC_API_KEY"

INFO_BASE_PATH = "/ext/info"


def get_avarpc_dir() -> Path:
    """Get ~/.avarpc (global config directory)."""
    return Path.home() / AVARPC_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_avarpc_dir() / "config.json"


def get_local_config_path(cwd: Path) -> Path:
    """Get the project-local config file path for a working directory."""
    return cwd / AVARPC_DIR_NAME / "config.json"
