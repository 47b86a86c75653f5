"""url-info CLI — analyse a web page from the command line.

Usage:
    python cli/main.py --help
    python cli/main.py analyze https://example.com
    python cli/main.py analyze https://example.com --json
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from urlinfo.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from urlinfo.analyzer import (
    Analyzer,
    AnalyzerError,
    ErrorCode,
    LinkAccessibilityChecker,
    analyze_sync,
)
from urlinfo.analyzer.models import AnalysisResult
from urlinfo.config import settings
from urlinfo.logging_config import setup_logging

app = typer.Typer(
    name="url-info",
    help="Analyse the structure of a web page.",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Analyse the structure of a web page."""


def _render(result: AnalysisResult) -> str:
    lines = [
        f"HTML version      : {result.html_version}",
        f"Title             : {result.page_title or '(none)'}",
        f"Headings          : {result.headings_summary}",
        f"Links             : {result.link_count}",
        f"Inaccessible links: {result.inaccessible_link_count}",
        f"Login form        : {'yes' if result.has_login_form else 'no'}",
    ]
    return "\n".join(lines)


@app.command("analyze")
def analyze_cmd(
    url: str = typer.Argument(..., help="URL of the page to analyse."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    window: Optional[float] = typer.Option(
        None, "--window", help="Link probe collection window in seconds."
    ),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level."),
) -> None:
    """Fetch a page and report its HTML version, headings, links and login form."""
    setup_logging(log_level)
    analyzer = Analyzer(LinkAccessibilityChecker(window=window))
    try:
        result = analyze_sync(url, analyzer)
    except AnalyzerError as exc:
        typer.echo(f"[analyze] {exc}", err=True)
        raise typer.Exit(code=2 if exc.code is ErrorCode.INVALID_ARGUMENT else 1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(_render(result))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
