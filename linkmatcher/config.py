from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_PORT = 80
BACKENDS = ("socket", "httpx")
BODY_BOUNDARIES = ("headers", "marker")
LINE_ENDINGS = ("\r\n", "\n")


class ConfigError(Exception):
    """Raised when the configuration file is missing or malformed."""


def load_yaml_config(path: str) -> Dict[str, Any]:
    """Load a YAML configuration file into a dictionary."""
    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping.")

    return data


def get_section(config: Dict[str, Any], section: str) -> Dict[str, Any]:
    """Return a configuration section, ensuring it is a mapping."""
    value = config.get(section, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{section}' must be a mapping.")
    return value


@dataclass
class FetchConfig:
    port: int = DEFAULT_PORT
    backend: str = "socket"
    body_boundary: str = "headers"
    # None blocks until the server closes the connection
    timeout_sec: Optional[float] = None
    line_ending: str = "\r\n"
    read_chunk_size: int = 4096
    log_body: bool = True

    def __post_init__(self):
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"fetch.port must be an integer, got {self.port!r}")
        if not 1 <= self.port <= 65535:
            raise ValueError("fetch.port must be between 1 and 65535")
        if self.backend not in BACKENDS:
            raise ValueError("fetch.backend must be one of: socket, httpx")
        if self.body_boundary not in BODY_BOUNDARIES:
            raise ValueError("fetch.body_boundary must be one of: headers, marker")
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ValueError("fetch.timeout_sec must be > 0 or null")
        if self.line_ending not in LINE_ENDINGS:
            raise ValueError("fetch.line_ending must be CRLF or LF")
        if self.read_chunk_size < 1:
            raise ValueError("fetch.read_chunk_size must be >= 1")


@dataclass
class LinksConfig:
    local_strip_trailing_slash: bool = False
    remote_strip_trailing_slash: bool = True
    encoding: str = "utf-8"

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"links.encoding is not a known codec: {self.encoding}") from None


@dataclass
class LogsConfig:
    log_file: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"logs.log_level is not a logging level: {self.log_level}")


@dataclass
class LinkMatcherConfig:
    fetch: FetchConfig = field(default_factory=FetchConfig)
    links: LinksConfig = field(default_factory=LinksConfig)
    logs: LogsConfig = field(default_factory=LogsConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinkMatcherConfig":
        sections = {}
        for name, section_cls in (("fetch", FetchConfig), ("links", LinksConfig), ("logs", LogsConfig)):
            section = get_section(data, name)
            unknown = sorted(set(section) - {f.name for f in fields(section_cls)})
            if unknown:
                raise ConfigError(f"Unknown key(s) in section '{name}': {', '.join(unknown)}")
            sections[name] = section_cls(**section)
        return cls(**sections)

    @classmethod
    def from_yaml(cls, config_path: str) -> "LinkMatcherConfig":
        return cls.from_dict(load_yaml_config(config_path))


# Process-wide settings used by the module-level operations
_active_config = LinkMatcherConfig()


def get_config() -> LinkMatcherConfig:
    return _active_config


def set_config(config: LinkMatcherConfig) -> None:
    global _active_config
    _active_config = config


def set_port(port: int) -> None:
    """Change the default remote port for subsequent fetches."""
    _active_config.fetch = replace(_active_config.fetch, port=port)
