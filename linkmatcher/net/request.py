import re

from ..errors import ConnectionFailure
from ..url_tools import RemoteAddress

CRLF = "\r\n"

_UNSAFE_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def build_request(address: RemoteAddress, line_ending: str = CRLF) -> bytes:
    """Build a minimal HTTP/1.1 GET request for one page.

    Args:
        address: Host and path+query to request
        line_ending: Terminator for each request line

    Returns:
        Encoded request ending with a blank line

    Raises:
        ConnectionFailure: target or host contains whitespace or control
            characters that would break the request line
    """
    for value in (address.request_target, address.host_header):
        if _UNSAFE_RE.search(value):
            raise ConnectionFailure(f"Refusing to send request with unsafe target {value!r}")

    lines = [
        f"GET {address.request_target} HTTP/1.1",
        f"Host: {address.host_header}",
        # Server closes the connection after one page; reading stops at EOF
        "Connection: close",
        "",
        "",
    ]
    return line_ending.join(lines).encode("utf-8")
