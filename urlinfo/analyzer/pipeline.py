"""Analysis pipeline — URL in, :class:`AnalysisResult` out.

``Analyzer.analyze`` orchestrates the full run:

    fetch → parse → version / title / headings / links / login form
          → link accessibility → AnalysisResult

A failure to fetch or parse aborts the run; nothing downstream executes.
"""

from __future__ import annotations

import asyncio
import logging

from urlinfo.analyzer.accessibility import LinkAccessibilityChecker
from urlinfo.analyzer.errors import InvalidURLError
from urlinfo.analyzer.fetcher import fetch_url
from urlinfo.analyzer.links import extract_links
from urlinfo.analyzer.login_form import detect_login_form
from urlinfo.analyzer.metadata import count_headings, extract_title
from urlinfo.analyzer.models import AnalysisResult
from urlinfo.analyzer.parser import parse_document
from urlinfo.analyzer.version import detect_html_version

logger = logging.getLogger(__name__)


class Analyzer:
    """Run the page analysis pipeline for one URL at a time.

    Args:
        checker: Link accessibility checker; a default one built from
            ``settings`` is used when omitted.
        request_timeout: Timeout for the page fetch (default
            ``settings.request_timeout``).
    """

    def __init__(
        self,
        checker: LinkAccessibilityChecker | None = None,
        *,
        request_timeout: float | None = None,
    ) -> None:
        self.checker = checker or LinkAccessibilityChecker()
        self.request_timeout = request_timeout

    async def analyze(self, url: str) -> AnalysisResult:
        """Fetch *url* and return its :class:`AnalysisResult`.

        Raises:
            InvalidURLError: If *url* is empty.
            FetchError: If the page cannot be retrieved with a 200 response.
            ParseError: If the body cannot be read as markup.
        """
        if not url or not url.strip():
            raise InvalidURLError("url is required")

        raw = await fetch_url(url, timeout=self.request_timeout)
        doc = parse_document(raw.content)

        html_version = detect_html_version(raw.html)
        page_title = extract_title(doc)
        heading_counts = count_headings(doc)
        links = extract_links(doc)
        has_login_form = detect_login_form(doc)

        inaccessible = await self.checker.count_inaccessible(links)

        result = AnalysisResult(
            html_version=html_version,
            page_title=page_title,
            heading_counts=heading_counts,
            link_count=len(links),
            inaccessible_link_count=inaccessible,
            has_login_form=has_login_form,
        )
        logger.info(
            "analysis complete",
            extra={
                "url": url,
                "html_version": result.html_version,
                "links": result.link_count,
                "inaccessible_links": result.inaccessible_link_count,
            },
        )
        return result


async def analyze(url: str) -> AnalysisResult:
    """Analyse *url* with a default-configured :class:`Analyzer`."""
    return await Analyzer().analyze(url)


def analyze_sync(url: str, analyzer: Analyzer | None = None) -> AnalysisResult:
    """Blocking wrapper around :meth:`Analyzer.analyze` for synchronous callers."""
    return asyncio.run((analyzer or Analyzer()).analyze(url))
