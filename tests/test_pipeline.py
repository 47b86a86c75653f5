"""End-to-end tests for :class:`Analyzer`.

Mocking strategy:
- ``respx`` mocks both the page fetch and every link probe, so the whole
  pipeline runs without touching the network.
- ``parse_document`` is patched where a test needs to prove that nothing
  downstream of a failed stage runs.
"""

from __future__ import annotations

import time
from unittest.mock import patch

import httpx
import pytest
import respx
from bs4.builder import ParserRejectedMarkup

from urlinfo.analyzer import (
    AnalysisResult,
    Analyzer,
    FetchError,
    InvalidURLError,
    LinkAccessibilityChecker,
    ParseError,
    analyze_sync,
)


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_PAGE_URL = "https://site.example.com/"

_EXAMPLE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Example</title></head>
<body>
  <h1>One</h1>
  <h1>Two</h1>
  <h2>Sub</h2>
  <a href="https://unreachable.invalid">Broken</a>
</body>
</html>
"""

_NO_LINKS_HTML = """\
<html><head><title>Plain</title></head>
<body><h3>Nothing to click</h3></body></html>
"""

_LOGIN_HTML = """\
<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN">
<html><head><title>Members</title></head>
<body>
  <form action="/session"><input type="password" name="pw"></form>
  <a href="https://ok.example.com/help">Help</a>
  <a href="https://ok.example.com/help">Help again</a>
</body></html>
"""


def _analyzer(window: float = 5.0) -> Analyzer:
    return Analyzer(LinkAccessibilityChecker(window=window))


# ---------------------------------------------------------------------------
# Successful analyses
# ---------------------------------------------------------------------------

class TestAnalyze:
    @pytest.mark.asyncio
    async def test_example_page(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_EXAMPLE_HTML))
            respx.get("https://unreachable.invalid").mock(side_effect=httpx.ConnectError)
            result = await _analyzer().analyze(_PAGE_URL)

        assert result == AnalysisResult(
            html_version="HTML 5",
            page_title="Example",
            heading_counts=(2, 1, 0, 0, 0, 0),
            link_count=1,
            inaccessible_link_count=1,
            has_login_form=False,
        )

    @pytest.mark.asyncio
    async def test_page_without_links_skips_the_window(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_NO_LINKS_HTML))
            start = time.monotonic()
            result = await _analyzer(window=30.0).analyze(_PAGE_URL)
            elapsed = time.monotonic() - start

        assert result.link_count == 0
        assert result.inaccessible_link_count == 0
        assert result.html_version == "UNKNOWN"
        assert result.heading_counts == (0, 0, 1, 0, 0, 0)
        assert elapsed < 5.0

    @pytest.mark.asyncio
    async def test_login_page_with_duplicate_links(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_LOGIN_HTML))
            help_route = respx.get("https://ok.example.com/help").mock(
                return_value=httpx.Response(200)
            )
            result = await _analyzer().analyze(_PAGE_URL)

        assert result.html_version == "HTML 4.01 Strict"
        assert result.page_title == "Members"
        assert result.has_login_form is True
        assert result.link_count == 2
        assert result.inaccessible_link_count == 0
        assert help_route.call_count == 2

    @pytest.mark.asyncio
    async def test_result_satisfies_its_invariants(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_EXAMPLE_HTML))
            respx.get("https://unreachable.invalid").mock(side_effect=httpx.ConnectError)
            result = await _analyzer().analyze(_PAGE_URL)

        result.validate()

    def test_analyze_sync_wrapper(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_NO_LINKS_HTML))
            result = analyze_sync(_PAGE_URL, _analyzer())

        assert result.page_title == "Plain"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestAnalyzeFailures:
    @pytest.mark.asyncio
    async def test_not_found_raises_fetch_error(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(404))
            with pytest.raises(FetchError):
                await _analyzer().analyze(_PAGE_URL)

    @pytest.mark.asyncio
    async def test_fetch_failure_stops_the_pipeline(self) -> None:
        with respx.mock:
            respx.get(_PAGE_URL).mock(side_effect=httpx.ConnectTimeout)
            with patch("urlinfo.analyzer.pipeline.parse_document") as mock_parse:
                with pytest.raises(FetchError):
                    await _analyzer().analyze(_PAGE_URL)

        mock_parse.assert_not_called()

    @pytest.mark.asyncio
    async def test_parse_failure_stops_the_pipeline(self) -> None:
        checker = LinkAccessibilityChecker(window=5.0)
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_EXAMPLE_HTML))
            with patch(
                "urlinfo.analyzer.pipeline.parse_document",
                side_effect=ParseError("bad stream"),
            ), patch.object(checker, "count_inaccessible") as mock_count:
                with pytest.raises(ParseError):
                    await Analyzer(checker).analyze(_PAGE_URL)

        mock_count.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejected_byte_stream_stops_before_link_checks(self) -> None:
        checker = LinkAccessibilityChecker(window=5.0)
        rejection = ParserRejectedMarkup("unreadable byte stream")
        with respx.mock:
            respx.get(_PAGE_URL).mock(return_value=httpx.Response(200, text=_EXAMPLE_HTML))
            with patch(
                "urlinfo.analyzer.parser.BeautifulSoup", side_effect=rejection
            ), patch.object(checker, "count_inaccessible") as mock_count:
                with pytest.raises(ParseError) as excinfo:
                    await Analyzer(checker).analyze(_PAGE_URL)

        assert excinfo.value.__cause__ is rejection
        mock_count.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["", "   "])
    async def test_empty_url_is_rejected(self, url: str) -> None:
        with respx.mock:
            with pytest.raises(InvalidURLError):
                await _analyzer().analyze(url)
            assert respx.calls.call_count == 0
