"""Configuration loading from TOML file for qqbot."""

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit

from cqcode.command import CommandConfig
from cqcode.message import MESSAGE_FORMATS

# Endpoint schemes and the client that handles them
HTTP_SCHEMES = ("http", "https")
WS_SCHEMES = ("ws", "wss")


@dataclass
class ApiConfig:
    """CQHTTP API connection configuration."""

    # API endpoint; http(s):// uses the HTTP API, ws(s):// the WebSocket API
    endpoint: str = "http://127.0.0.1:5700"
    # access_token configured in CQHTTP (empty for none)
    token: str = ""
    # HMAC-SHA1 secret used to sign webhook posts (empty disables verification)
    secret: str = ""
    # Seconds to wait for an API response
    timeout: float = 10.0
    # How outgoing messages are encoded: "string" (CQ string) or "array" (segments)
    message_format: str = "string"

    @property
    def scheme(self) -> str:
        return urlsplit(self.endpoint).scheme.lower()

    @property
    def is_websocket(self) -> bool:
        return self.scheme in WS_SCHEMES


@dataclass
class LoggingConfig:
    """Logging configuration."""

    # Console log level (file handler always captures DEBUG)
    level: str = "INFO"
    # Directory for log files
    dir: str = "data/logs"
    # Number of days to keep rotated log files
    keep_days: int = 30
    # Total log size cap in MB; oldest files are deleted when exceeded
    max_total_mb: int = 100


@dataclass
class BotConfig:
    """Top-level qqbot configuration, aggregating all sub-configs."""

    api: ApiConfig = field(default_factory=ApiConfig)
    command: CommandConfig = field(default_factory=CommandConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path = "config.toml") -> BotConfig:
    """
    Load configuration from a TOML file.

    Falls back to defaults for any missing fields.
    Raises FileNotFoundError if the file does not exist, and ValueError for
    an unsupported endpoint scheme or message format.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        raw = tomllib.load(f)

    # Build config from raw dict, using defaults for missing fields
    api = ApiConfig(**raw.get("api", {}))
    if api.scheme not in HTTP_SCHEMES + WS_SCHEMES:
        raise ValueError(f"Bad API endpoint scheme: {api.endpoint}")
    if api.message_format not in MESSAGE_FORMATS:
        raise ValueError(f"Unknown message_format: {api.message_format}")

    command = CommandConfig(**raw.get("command", {}))
    logging_cfg = LoggingConfig(**raw.get("logging", {}))

    return BotConfig(api=api, command=command, logging=logging_cfg)


def get_config_path() -> str:
    """Get config file path from command-line args or default."""
    # Simple arg parsing: main.py [config_path]
    if len(sys.argv) > 1:
        return sys.argv[1]
    return "config.toml"
