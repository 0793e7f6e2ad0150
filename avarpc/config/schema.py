"""Pydantic models for avarpc configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from avarpc.core.constants import (
    DEFAULT_API_KEY_ENV,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT,
)


class NodeConfig(BaseModel):
    """Where and how to reach the node.

    Example in config.json:
        "node": {
            "host": "api.example.org",
            "port": 443,
            "protocol": "https",
            "timeout": 10
        }
    """

    model_config = ConfigDict(extra="forbid")

    host: str = DEFAULT_HOST
    """Hostname or IP address of the node."""

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    """Port of the node's HTTP API."""

    protocol: Literal["http", "https"] = DEFAULT_PROTOCOL
    """URL scheme used to reach the node."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """Request timeout in seconds."""

    api_key_env: str | None = DEFAULT_API_KEY_ENV
    """Environment variable holding a bearer token, or None to never send one."""

    @field_validator("host")
    @classmethod
    def host_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("host must not be empty")
        if "://" in v or "/" in v:
            raise ValueError(f"host must be a bare hostname or IP, got: {v!r}")
        return v


class LoggingConfig(BaseModel):
    """Logging behaviour of the CLI."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Level for the avarpc logger."""


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "node": {"host": "127.0.0.1", "port": 9650},
            "logging": {"level": "INFO"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    node: NodeConfig = NodeConfig()
    logging: LoggingConfig = LoggingConfig()
