"""Plain-text HTTP/1.1 GET over a raw TCP socket.

One connection per request: connect, send the request, read until the
server closes the stream, close. No TLS, no redirects, no keep-alive.
"""

import logging
import socket
from contextlib import closing
from typing import Optional

from ..config import DEFAULT_PORT
from ..errors import ConnectionFailure
from ..url_tools import RemoteAddress
from .request import CRLF, build_request
from .response import HttpResponse, parse_response

logger = logging.getLogger(__name__)


class SocketHttpClient:
    """Minimal HTTP client speaking directly to a socket."""

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
        line_ending: str = CRLF,
        chunk_size: int = 4096,
    ):
        """Initialize socket client.

        Args:
            port: Port used when the address carries none
            timeout: Socket timeout in seconds, None blocks indefinitely
            line_ending: Request line terminator
            chunk_size: Bytes requested per recv() call
        """
        self.port = port
        self.timeout = timeout
        self.line_ending = line_ending
        self.chunk_size = chunk_size

    def get(self, address: RemoteAddress) -> HttpResponse:
        return parse_response(self.exchange(address))

    def exchange(self, address: RemoteAddress) -> bytes:
        """Send a GET request and return the raw response bytes.

        Raises:
            ConnectionFailure: empty host, connect error, or I/O error
                while sending or reading
        """
        if not address.host:
            raise ConnectionFailure("URL does not contain a usable host")

        port = address.port if address.port is not None else self.port
        request = build_request(address, self.line_ending)

        try:
            sock = socket.create_connection((address.host, port), timeout=self.timeout)
        except OSError as e:
            raise ConnectionFailure(f"Could not connect to {address.host}:{port}: {e}") from e

        logger.debug(f"Connected to {address.host}:{port}, requesting {address.request_target}")

        with closing(sock):
            try:
                sock.sendall(request)
                raw = self._read_to_eof(sock)
            except OSError as e:
                raise ConnectionFailure(
                    f"I/O error while talking to {address.host}:{port}: {e}"
                ) from e

        logger.debug(f"Received {len(raw)} bytes from {address.host}:{port}")
        return raw

    def _read_to_eof(self, sock: socket.socket) -> bytes:
        chunks = []
        while True:
            chunk = sock.recv(self.chunk_size)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)
