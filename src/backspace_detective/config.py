"""Configuration loading and validation for Backspace Detective."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, get_args

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_FILE = "backspace_detective.yaml"

LogLevel = Literal["debug", "info", "warning", "error", "critical"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class ServerConfig(BaseModel):
    """Configuration for the HTTP analysis service."""

    host: str = "127.0.0.1"
    port: int = Field(default=8765, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Configuration for logging output."""

    level: LogLevel = "info"


class MCPConfig(BaseModel):
    """Configuration for the MCP tool server."""

    server_name: str = Field(
        default="backspace-detective",
        description="Name the MCP server announces to clients",
    )


class BackspaceDetectiveConfig(BaseModel):
    """Top-level Backspace Detective configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    mcp: MCPConfig = Field(default_factory=MCPConfig)


def load_config(path: str | Path | None = None) -> BackspaceDetectiveConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML config file. If None, uses
              'backspace_detective.yaml' in the current directory, falling
              back to defaults.

    Returns:
        A validated BackspaceDetectiveConfig instance.
    """
    path = Path(DEFAULT_CONFIG_FILE) if path is None else Path(path)

    if path.exists():
        with open(path) as f:
            raw: dict[str, Any] = yaml.safe_load(f) or {}
        return BackspaceDetectiveConfig.model_validate(raw)

    return BackspaceDetectiveConfig()
