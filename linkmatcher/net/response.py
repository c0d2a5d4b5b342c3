"""HTTP/1.1 response parsing and HTML body extraction."""

import codecs
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..errors import ProtocolFailure
from ..patterns import DOCTYPE_MARKER

logger = logging.getLogger(__name__)

_HEADER_END_RE = re.compile(rb"\r?\n\r?\n")
_STATUS_LINE_RE = re.compile(r"HTTP/\d(?:\.\d)?\s+(\d{3})(?:\s+(.*))?$", re.IGNORECASE)
_CHARSET_RE = re.compile(r"charset\s*=\s*[\"']?([a-z0-9_\-:.]+)", re.IGNORECASE)


@dataclass
class HttpResponse:
    status_code: int
    reason: str = ""
    # Header names are lower-cased
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def charset(self) -> Optional[str]:
        match = _CHARSET_RE.search(self.headers.get("content-type", ""))
        return match.group(1) if match else None

    @property
    def text(self) -> str:
        """Decode the body using the declared charset, falling back to UTF-8."""
        if not self.content:
            return ""
        encoding = self.charset or "utf-8"
        try:
            codecs.lookup(encoding)
        except LookupError:
            logger.debug(f"Unknown charset {encoding!r}, decoding as utf-8")
            encoding = "utf-8"
        return self.content.decode(encoding, errors="replace")


def parse_response(raw: bytes) -> HttpResponse:
    """Split a raw HTTP/1.1 response into status, headers and body.

    The header block ends at the first blank line. Chunked bodies are
    decoded; otherwise Content-Length, when valid, bounds the body.

    Raises:
        ProtocolFailure: no blank line after the headers, or no status line
    """
    boundary = _HEADER_END_RE.search(raw)
    if boundary is None:
        raise ProtocolFailure("Response has no blank line between headers and body")

    head = raw[: boundary.start()].decode("iso-8859-1")
    lines = head.splitlines()
    status_line = lines[0].strip() if lines else ""
    status = _STATUS_LINE_RE.match(status_line)
    if not status:
        raise ProtocolFailure(f"Malformed status line: {status_line[:80]!r}")

    headers: Dict[str, str] = {}
    for line in lines[1:]:
        name, sep, value = line.partition(":")
        if not sep:
            continue
        key = name.strip().lower()
        value = value.strip()
        headers[key] = f"{headers[key]}, {value}" if key in headers else value

    body = raw[boundary.end():]
    if "chunked" in headers.get("transfer-encoding", "").lower():
        body = _dechunk(body)
    else:
        length = headers.get("content-length", "")
        if length.isdigit():
            body = body[: int(length)]

    return HttpResponse(
        status_code=int(status.group(1)),
        reason=(status.group(2) or "").strip(),
        headers=headers,
        content=body,
    )


def _dechunk(body: bytes) -> bytes:
    chunks = []
    pos = 0

    while True:
        line_end = body.find(b"\n", pos)
        if line_end == -1:
            raise ProtocolFailure("Chunked body ended before the last chunk")

        size_field = body[pos:line_end].split(b";", 1)[0].strip()
        try:
            size = int(size_field, 16)
        except ValueError:
            raise ProtocolFailure(f"Invalid chunk size: {size_field[:20]!r}") from None

        if size == 0:
            break

        start = line_end + 1
        end = start + size
        if end > len(body):
            raise ProtocolFailure("Chunked body ended inside a chunk")
        chunks.append(body[start:end])

        pos = end
        if body.startswith(b"\r\n", pos):
            pos += 2
        elif body.startswith(b"\n", pos):
            pos += 1

    return b"".join(chunks)


def extract_body(response: HttpResponse, boundary: str = "headers") -> str:
    """Return the HTML document carried by a response.

    Args:
        response: Parsed response
        boundary: "headers" takes the body after the header block as is;
            "marker" additionally discards everything before the first
            literal <!DOCTYPE html>

    Raises:
        ProtocolFailure: marker boundary requested and the marker is absent
    """
    text = response.text
    if boundary == "headers":
        return text

    if boundary == "marker":
        index = text.find(DOCTYPE_MARKER)
        if index == -1:
            raise ProtocolFailure(f"Response does not contain {DOCTYPE_MARKER}")
        return text[index:]

    raise ValueError(f"Unknown body boundary: {boundary}")
