"""Analyzer package — fetch a page and describe its structure."""

from urlinfo.analyzer.accessibility import LinkAccessibilityChecker
from urlinfo.analyzer.errors import (
    AnalyzerError,
    ErrorCode,
    FetchError,
    InvalidURLError,
    ParseError,
)
from urlinfo.analyzer.models import AnalysisResult, RawPage
from urlinfo.analyzer.pipeline import Analyzer, analyze, analyze_sync

__all__ = [
    "Analyzer",
    "AnalysisResult",
    "AnalyzerError",
    "ErrorCode",
    "FetchError",
    "InvalidURLError",
    "LinkAccessibilityChecker",
    "ParseError",
    "RawPage",
    "analyze",
    "analyze_sync",
]
