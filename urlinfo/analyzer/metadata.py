"""Title and heading extraction from a parsed document."""

from __future__ import annotations

from typing import Tuple

from bs4 import BeautifulSoup

from urlinfo.analyzer.models import HEADING_TAGS


def extract_title(doc: BeautifulSoup) -> str:
    """Return the text content of the first ``<title>`` element, or empty string."""
    title = doc.find("title")
    if title is None:
        return ""
    return title.get_text()


def count_headings(doc: BeautifulSoup) -> Tuple[int, ...]:
    """Return the number of ``h1``..``h6`` elements anywhere in *doc*."""
    return tuple(len(doc.find_all(tag)) for tag in HEADING_TAGS)
