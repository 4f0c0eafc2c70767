"""url-scraper — fetch one web page and list its hyperlinks.

Example::

    import asyncio
    from url_scraper import UrlScraper

    scraper = asyncio.run(UrlScraper.fetch("http://phoronix.com/"))
    for text, url in scraper:
        print(f"{text}: {url}")
"""

from url_scraper.errors import RequestError, ScraperError, UrlParsingError
from url_scraper.models import Link
from url_scraper.scraper import UrlScraper, parse_url
from url_scraper.version import __version__

__all__ = [
    "UrlScraper",
    "Link",
    "parse_url",
    "ScraperError",
    "UrlParsingError",
    "RequestError",
]
