"""URL helpers for address decomposition and link normalization."""

from dataclasses import dataclass
from typing import Optional

from .patterns import ADDRESS_RE


@dataclass(frozen=True)
class RemoteAddress:
    """Host and path+query(+fragment) pulled out of an input URL."""

    host: str
    path_query: str = ""
    port: Optional[int] = None

    @property
    def request_target(self) -> str:
        """Path and query to put on the request line, never empty."""
        target = remove_fragment(self.path_query)
        if not target.startswith("/"):
            target = "/" + target
        return target

    @property
    def host_header(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


def split_address(url: str) -> RemoteAddress:
    """Decompose a URL into a RemoteAddress.

    Args:
        url: URL such as ``http://sub.example.com/a/b?q=1``

    Returns:
        RemoteAddress; ``host`` is empty when the URL does not look like
        ``scheme://host(.label)+/rest`` or its port is outside 1-65535
    """
    match = ADDRESS_RE.search(url.strip())
    if not match:
        return RemoteAddress(host="")

    port = int(match.group("port")) if match.group("port") else None
    if port is not None and not 1 <= port <= 65535:
        return RemoteAddress(host="")

    return RemoteAddress(
        host=match.group("host"),
        path_query=match.group("rest") or "",
        port=port,
    )


def remove_fragment(url: str) -> str:
    return url.split("#", 1)[0]


def strip_trailing_slash(url: str) -> str:
    """Remove a single trailing slash, e.g. http://a.com/x/ -> http://a.com/x."""
    if url.endswith("/"):
        return url[:-1]
    return url
