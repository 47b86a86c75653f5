"""HTML version detection by doctype signature.

This is a substring heuristic, not a doctype parser: a signature that
appears anywhere in the raw text (a comment, a script) counts as a match,
and matching is case-sensitive.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from urlinfo.analyzer.models import UNKNOWN_VERSION

# Ordered (label, signature) pairs; the first matching entry wins.
DOCTYPE_SIGNATURES: Tuple[Tuple[str, str], ...] = (
    ("HTML 4.01 Strict", '"-//W3C//DTD HTML 4.01//EN"'),
    ("HTML 4.01 Transitional", '"-//W3C//DTD HTML 4.01 Transitional//EN"'),
    ("HTML 4.01 Frameset", '"-//W3C//DTD HTML 4.01 Frameset//EN"'),
    ("XHTML 1.0 Strict", '"-//W3C//DTD XHTML 1.0 Strict//EN"'),
    ("XHTML 1.0 Transitional", '"-//W3C//DTD XHTML 1.0 Transitional//EN"'),
    ("XHTML 1.0 Frameset", '"-//W3C//DTD XHTML 1.0 Frameset//EN"'),
    ("XHTML 1.1", '"-//W3C//DTD XHTML 1.1//EN"'),
    ("HTML 5", "<!DOCTYPE html>"),
)


def detect_html_version(
    html: str,
    signatures: Sequence[Tuple[str, str]] = DOCTYPE_SIGNATURES,
) -> str:
    """Return the label of the first signature found in *html*, or ``"UNKNOWN"``."""
    for label, signature in signatures:
        if signature in html:
            return label
    return UNKNOWN_VERSION
