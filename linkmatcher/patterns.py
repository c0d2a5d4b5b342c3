"""Compiled regex patterns for anchor and address matching.

All patterns are pre-compiled and case-insensitive. Matching is purely
lexical: no DOM, no tag nesting, no percent-decoding.
"""

import re

# ============================================================================
# Anchor Patterns
# ============================================================================

# Quoted attribute other than href, e.g. class="nav_item" or id="top"
_ATTRIBUTE = r'[a-z]+\s*=\s*"[a-z0-9_]+"\s*'

# Scheme + dotted hostname, at least two labels of 1-63 chars each
_SCHEME_HOST = r"https?://[a-z0-9\-]{1,63}(?:\.[a-z0-9\-]{1,63})+/?"

# Path segment: /dir, /dir/ or /file.ext
_PATH_SEGMENT = r"/[a-z0-9_\-]+(?:/|\.[a-z0-9]+)?"

_QUERY_PAIR = r"[a-z0-9]+=[a-z0-9+:,_\-]+"

# Fragment with optional =value parts, e.g. #section or #page=2
_FRAGMENT = r"\#[a-z0-9+:,_\-]+(?:=[a-z0-9+:,_\-.]+)*"

# Matches: <a class="x" href="http://example.com/docs/page.html?id=1#top" id="y">
# Group "url" holds the target without its fragment.
ANCHOR_RE = re.compile(
    rf"""
    <a\s+
    (?:{_ATTRIBUTE})*
    href\s*=\s*"
    (?P<url>
        (?:{_SCHEME_HOST})?
        (?:{_PATH_SEGMENT})*
        (?:\?{_QUERY_PAIR}(?:&{_QUERY_PAIR})*)?
    )
    (?P<fragment>(?:{_FRAGMENT})*)
    "\s*
    (?:{_ATTRIBUTE})*
    \s*>
    """,
    re.IGNORECASE | re.VERBOSE,
)

# ============================================================================
# Address Patterns
# ============================================================================

# Splits http(s)://sub.example.com:8080/a/b?q=1 into host, port and the rest
ADDRESS_RE = re.compile(
    r"https?://(?P<host>[a-z0-9\-]{1,63}(?:\.[a-z0-9\-]{1,63})+)(?::(?P<port>\d+))?(?P<rest>\S*)",
    re.IGNORECASE,
)

# Literal document start used by the marker-based body boundary
DOCTYPE_MARKER = "<!DOCTYPE html>"
