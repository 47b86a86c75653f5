"""Login form detection.

A vocabulary scan over the serialized document.  It reports pages that merely
mention "password" as having a login form and misses forms labelled in other
languages; a stricter detector can replace :func:`detect_login_form` without
touching the rest of the pipeline.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

LOGIN_VOCABULARY = ("login", "password", "signup", "signin", "logout")


def detect_login_form(doc: BeautifulSoup) -> bool:
    """Return ``True`` if the serialized *doc* contains any login-related word."""
    html = str(doc)
    for word in LOGIN_VOCABULARY:
        if word in html:
            return True
    return False
