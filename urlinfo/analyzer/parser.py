"""Markup parsing: turns fetched bytes into a queryable document tree."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from urlinfo.analyzer.errors import ParseError

logger = logging.getLogger(__name__)

PARSER_FEATURES = "html5lib"


def parse_document(markup: bytes | str) -> BeautifulSoup:
    """Parse *markup* into a :class:`~bs4.BeautifulSoup` tree.

    The parser follows HTML5 tree construction: broken HTML still yields a
    tree, and implied elements such as ``<body>`` are always present.  Only
    input that cannot be read as a markup stream at all is rejected.

    Raises:
        ParseError: If *markup* is not bytes/text or the parser refuses it.
    """
    if not isinstance(markup, (bytes, str)):
        raise ParseError(f"Cannot parse markup of type {type(markup).__name__}")

    try:
        return BeautifulSoup(markup, PARSER_FEATURES)
    except (ParserRejectedMarkup, UnicodeDecodeError) as exc:
        logger.warning("markup rejected by parser", extra={"error": str(exc)})
        raise ParseError(f"Cannot parse document: {exc}") from exc
