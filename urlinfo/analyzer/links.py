"""Anchor extraction from the document body."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup


def extract_links(doc: BeautifulSoup) -> List[str]:
    """Return the ``href`` of every ``<a>`` under ``<body>``, in document order.

    Duplicates, relative paths and malformed values are kept as-is; an anchor
    without ``href`` contributes an empty string.
    """
    body = doc.body
    if body is None:
        return []
    return [anchor.get("href", "") for anchor in body.find_all("a")]
