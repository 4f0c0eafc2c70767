"""url-scraper CLI — list the hyperlinks found on one web page.

Usage:
    python cli/main.py --help
    python cli/main.py links https://example.com/
    python cli/main.py links https://example.com/ --html-file saved.html --json
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from url_scraper import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
import logging
from typing import Optional

import typer

from url_scraper import ScraperError, UrlScraper
from url_scraper.config import settings

app = typer.Typer(
    name="url-scraper",
    help="Fetch a web page and list its hyperlinks.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Configure logging for every sub-command."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("links")
def links(
    url: str = typer.Argument(..., help="Page URL (also the base for relative links)."),
    html_file: Optional[Path] = typer.Option(
        None,
        "--html-file",
        exists=True,
        dir_okay=False,
        help="Parse this local HTML file instead of fetching the URL.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array instead of text lines."),
) -> None:
    """Print every link on the page as `text: url`."""
    try:
        if html_file is not None:
            scraper = UrlScraper.from_html(url, html_file.read_text(encoding="utf-8"))
        else:
            scraper = asyncio.run(UrlScraper.fetch(url))
    except ScraperError as e:
        typer.echo(f"[links] {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        payload = [{"text": text, "url": str(link_url)} for text, link_url in scraper]
        typer.echo(json.dumps(payload, indent=2))
        return

    for text, link_url in scraper:
        typer.echo(f"{text}: {link_url}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
