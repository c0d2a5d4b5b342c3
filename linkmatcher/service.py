"""Local and remote link extraction operations.

Both operations catch LinkMatcherError at their boundary, log it and hand
back a failed ExtractionResult, so callers can tell "no links" apart from
"could not read the page" without handling exceptions.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import LinkMatcherConfig, get_config
from .errors import LinkMatcherError, ResourceUnavailable
from .extractor import LinkExtractor
from .net import create_client, extract_body
from .result import ExtractionResult
from .url_tools import split_address

logger = logging.getLogger(__name__)


class LinkMatcherService:
    """Finds unique anchor targets in local files or remote pages."""

    def __init__(self, config: Optional[LinkMatcherConfig] = None, client=None):
        """Initialize service.

        Args:
            config: Settings to use; defaults to the process-wide config
            client: HTTP client with a get(RemoteAddress) method; when omitted
                one is built from config.fetch on every fetch, so set_port
                also reaches services created earlier
        """
        self.config = config or get_config()
        self._client = client

    @property
    def client(self):
        if self._client is not None:
            return self._client
        return create_client(self.config.fetch)

    def find_links(self, path: Union[str, Path]) -> ExtractionResult:
        """Extract links from an HTML file (exact-match deduplication by default)."""
        source = str(path)
        try:
            html_content = self.read_document(path)
        except LinkMatcherError as e:
            logger.error(f"Error reading {source}: {e}")
            return ExtractionResult.failure(source, e)

        extractor = LinkExtractor(
            strip_trailing_slash=self.config.links.local_strip_trailing_slash
        )
        links = extractor.extract(html_content)
        logger.info(f"Found {len(links)} links in {source}")
        return ExtractionResult(source=source, links=links)

    def fetch_and_find_links(self, url: str) -> ExtractionResult:
        """Fetch a page over plain HTTP and extract its links.

        Trailing-slash variants collapse to one entry by default.
        """
        try:
            document = self.fetch_document(url)
        except LinkMatcherError as e:
            logger.error(f"Error fetching {url}: {e}")
            return ExtractionResult.failure(url, e)

        extractor = LinkExtractor(
            strip_trailing_slash=self.config.links.remote_strip_trailing_slash
        )
        links = extractor.extract(document)
        logger.info(f"Found {len(links)} links at {url}")
        return ExtractionResult(source=url, links=links)

    def read_document(self, path: Union[str, Path]) -> str:
        try:
            return Path(path).read_text(encoding=self.config.links.encoding, errors="replace")
        except (OSError, ValueError) as e:
            raise ResourceUnavailable(f"Cannot read {path}: {e}") from e

    def fetch_document(self, url: str) -> str:
        """Fetch a URL and return the HTML body of the response.

        Raises:
            ConnectionFailure: unusable host, connect or I/O error
            ProtocolFailure: no header/body boundary could be located
        """
        address = split_address(url)
        logger.debug(f"Resolved {url} -> host={address.host!r} path={address.path_query!r}")

        response = self.client.get(address)
        if not response.success:
            logger.warning(f"HTTP {response.status_code} {response.reason} for {url}")

        body = extract_body(response, self.config.fetch.body_boundary)
        if self.config.fetch.log_body:
            logger.debug(f"Response body from {url}:\n{body}")
        return body


def find_links(path: Union[str, Path]) -> ExtractionResult:
    return LinkMatcherService().find_links(path)


def fetch_and_find_links(url: str) -> ExtractionResult:
    return LinkMatcherService().fetch_and_find_links(url)
