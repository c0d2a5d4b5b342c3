"""Anchor target extractor.

Scans HTML text for ``<a ... href="URL" ...>`` constructs, drops the
fragment of each target and returns the distinct targets in first-seen
order. Anchors the pattern cannot read are skipped silently.
"""

import logging
from typing import List

from .patterns import ANCHOR_RE
from .url_tools import strip_trailing_slash as _strip_trailing_slash

logger = logging.getLogger(__name__)


class LinkExtractor:
    """Extract and deduplicate anchor targets from HTML text."""

    def __init__(self, strip_trailing_slash: bool = False):
        """Initialize link extractor.

        Args:
            strip_trailing_slash: Remove one trailing '/' before the duplicate
                check, so http://a.com/x and http://a.com/x/ collapse
        """
        self.strip_trailing_slash = strip_trailing_slash

    def extract(self, html_content: str) -> List[str]:
        """Extract anchor targets from HTML content.

        Args:
            html_content: HTML content as string

        Returns:
            List of fragment-free URLs (deduplicated, order-preserving)
        """
        if not html_content:
            return []

        seen = set()
        results = []

        for match in ANCHOR_RE.finditer(html_content):
            link = match.group("url")
            if link and self.strip_trailing_slash:
                link = _strip_trailing_slash(link)

            if not link or link in seen:
                continue

            seen.add(link)
            results.append(link)

        logger.debug(f"Extracted {len(results)} links")
        return results


def extract_links(html_content: str, strip_trailing_slash: bool = False) -> List[str]:
    return LinkExtractor(strip_trailing_slash=strip_trailing_slash).extract(html_content)
