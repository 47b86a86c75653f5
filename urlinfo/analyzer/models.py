"""Data models for the analyzer pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from urlinfo.analyzer.errors import AnalyzerError, ErrorCode

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

UNKNOWN_VERSION = "UNKNOWN"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    content: bytes
    status_code: int


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable outcome of one analysis run over one fetched document.

    ``inaccessible_link_count`` is a best-effort estimate: links whose probe
    did not finish inside the collection window are counted neither as
    reachable nor as unreachable, so the value is biased towards zero on slow
    networks.
    """

    html_version: str
    page_title: str
    heading_counts: Tuple[int, ...] = field(default=(0, 0, 0, 0, 0, 0))
    link_count: int = 0
    inaccessible_link_count: int = 0
    has_login_form: bool = False

    @property
    def headings_summary(self) -> str:
        """Return the heading counts as ``"h1: 2  h2: 1  ..."``."""
        return "  ".join(
            f"{tag}: {count}" for tag, count in zip(HEADING_TAGS, self.heading_counts)
        )

    def validate(self) -> None:
        """Raise :class:`AnalyzerError` if the result breaks its invariants."""
        if not self.html_version:
            raise AnalyzerError(
                "html_version is required", code=ErrorCode.INVALID_ARGUMENT
            )
        if len(self.heading_counts) != len(HEADING_TAGS):
            raise AnalyzerError(
                "heading_counts must hold one count per heading level",
                code=ErrorCode.INVALID_ARGUMENT,
            )
        if self.link_count < 0:
            raise AnalyzerError(
                "link_count must not be negative", code=ErrorCode.INVALID_ARGUMENT
            )
        if not 0 <= self.inaccessible_link_count <= self.link_count:
            raise AnalyzerError(
                "inaccessible_link_count must be between 0 and link_count",
                code=ErrorCode.INVALID_ARGUMENT,
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping keyed by the public wire names."""
        return {
            "HTMLVersion": self.html_version,
            "pageTitle": self.page_title,
            "headingsCount": dict(zip(HEADING_TAGS, self.heading_counts)),
            "linksCount": self.link_count,
            "inaccessibleLinksCount": self.inaccessible_link_count,
            "haveLoginForm": self.has_login_form,
        }
