"""Unique hyperlink extraction from local HTML files and plain-HTTP pages."""

from .config import ConfigError, LinkMatcherConfig, get_config, set_config, set_port
from .errors import (
    ConnectionFailure,
    FailureKind,
    LinkMatcherError,
    ProtocolFailure,
    ResourceUnavailable,
)
from .extractor import LinkExtractor, extract_links
from .logging_setup import configure_logging
from .result import ExtractionResult
from .service import LinkMatcherService, fetch_and_find_links, find_links
from .url_tools import RemoteAddress, split_address

__all__ = [
    "ConfigError",
    "ConnectionFailure",
    "ExtractionResult",
    "FailureKind",
    "LinkExtractor",
    "LinkMatcherConfig",
    "LinkMatcherError",
    "LinkMatcherService",
    "ProtocolFailure",
    "RemoteAddress",
    "ResourceUnavailable",
    "configure_logging",
    "extract_links",
    "fetch_and_find_links",
    "find_links",
    "get_config",
    "set_config",
    "set_port",
    "split_address",
]
