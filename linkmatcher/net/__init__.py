"""Network layer: request building, response parsing and HTTP clients."""

from .httpx_client import HttpxHttpClient
from .request import build_request
from .response import HttpResponse, extract_body, parse_response
from .socket_client import SocketHttpClient


def create_client(fetch_config):
    """Build the HTTP client selected by a FetchConfig."""
    if fetch_config.backend == "httpx":
        return HttpxHttpClient(port=fetch_config.port, timeout=fetch_config.timeout_sec)
    return SocketHttpClient(
        port=fetch_config.port,
        timeout=fetch_config.timeout_sec,
        line_ending=fetch_config.line_ending,
        chunk_size=fetch_config.read_chunk_size,
    )


__all__ = [
    "HttpResponse",
    "HttpxHttpClient",
    "SocketHttpClient",
    "build_request",
    "create_client",
    "extract_body",
    "parse_response",
]
