"""HTTPX-based alternative to the raw socket client.

Same observable exchange: one plain-text HTTP/1.1 GET with
``Connection: close`` and no redirect following.
"""

import logging
from typing import Optional

import httpx

from ..config import DEFAULT_PORT
from ..errors import ConnectionFailure
from ..url_tools import RemoteAddress
from .response import HttpResponse

logger = logging.getLogger(__name__)


class HttpxHttpClient:

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.port = port
        self.timeout = timeout
        # Tests inject httpx.MockTransport here
        self.transport = transport

    def get(self, address: RemoteAddress) -> HttpResponse:
        if not address.host:
            raise ConnectionFailure("URL does not contain a usable host")

        port = address.port if address.port is not None else self.port
        url = f"http://{address.host}:{port}{address.request_target}"

        try:
            with httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=False,
                transport=self.transport,
            ) as client:
                response = client.get(url, headers={"Connection": "close"})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ConnectionFailure(f"Request to {address.host}:{port} failed: {e}") from e

        logger.debug(f"HTTP {response.status_code} from {url}, {len(response.content)} bytes")

        return HttpResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers={name.lower(): value for name, value in response.headers.items()},
            content=response.content,
        )
