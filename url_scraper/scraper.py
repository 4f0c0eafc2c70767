"""Link extraction: turns one HTML document into ``(text, url)`` pairs.

A :class:`UrlScraper` parses its document once and can then be iterated any
number of times.  Every iteration is a fresh, lazy walk over the ``<a>``
elements in document order.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator
from urllib.parse import unquote

import httpx
import soupsieve as sv
from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from url_scraper.errors import UrlParsingError
from url_scraper.fetcher import default_client, fetch_html
from url_scraper.models import Link

logger = logging.getLogger(__name__)

# Compiled once; a fixed literal, so a failure here is a bug, not a runtime error.
_ANCHOR_SELECTOR = sv.compile("a")

# Inner HTML as an HTML5 serializer writes it: `<br>`, not `<br/>`, and only
# `&`, `<`, `>` escaped in text.
_INNER_HTML = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)

# Schemes that are meaningless without a host.
_AUTHORITY_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
# Schemes whose paths treat `\` as `/`.
_SPECIAL_SCHEMES = _AUTHORITY_SCHEMES | {"file"}

_C0_OR_SPACE = "".join(chr(c) for c in range(0x21))
_TAB_OR_NEWLINE = str.maketrans("", "", "\t\n\r")
_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_FORBIDDEN_DOMAIN_CHAR = re.compile(r"[\x00-\x20#%/:<>?@\[\\\]^|\x7f]")


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------

def _clean(value: str) -> str:
    """Drop surrounding C0 controls and spaces, and every tab or newline."""
    return value.strip(_C0_OR_SPACE).translate(_TAB_OR_NEWLINE)


def _has_forbidden_host(host: str) -> bool:
    # IPv6 literals come back without brackets and legitimately contain `:`.
    if ":" in host:
        return False
    return _FORBIDDEN_DOMAIN_CHAR.search(unquote(host)) is not None


def parse_url(url: str) -> httpx.URL:
    """Parse *url* as an absolute URL.

    Surrounding whitespace is ignored, as are tabs and newlines inside.

    Raises:
        UrlParsingError: If *url* is malformed, has no scheme, is an
            ``http``-like URL without a host, or its host contains a
            character no domain may hold.
    """
    try:
        parsed = httpx.URL(_clean(url))
    except httpx.InvalidURL as exc:
        raise UrlParsingError(exc) from exc

    if not parsed.scheme:
        raise UrlParsingError(f"relative URL without a base: {url!r}")
    if parsed.scheme in _AUTHORITY_SCHEMES and not parsed.host:
        raise UrlParsingError(f"empty host: {url!r}")
    if parsed.host and _has_forbidden_host(parsed.host):
        raise UrlParsingError(f"invalid domain character: {url!r}")
    return parsed


def _backslashes_to_slashes(base: httpx.URL, href: str) -> str:
    """Treat `\\` as `/` before any query or fragment, for special schemes."""
    if base.scheme not in _SPECIAL_SCHEMES:
        return href
    match = _SCHEME.match(href)
    if match and match.group(1).lower() not in _SPECIAL_SCHEMES:
        return href
    end = min((i for i in (href.find("?"), href.find("#")) if i != -1), default=len(href))
    return href[:end].replace("\\", "/") + href[end:]


def _resolve(base: httpx.URL, href: str) -> httpx.URL | None:
    """Join *href* onto *base*, or return ``None`` when it cannot be joined."""
    href = _backslashes_to_slashes(base, _clean(href))
    try:
        return base.join(href)
    except httpx.InvalidURL:
        return None

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class UrlScraper:
    """Holds a parsed HTML document and the URL it was served from.

    Build one with :meth:`fetch`, :meth:`fetch_with_client` or
    :meth:`from_html`; then iterate it to get :class:`~url_scraper.models.Link`
    pairs.  The instance is never mutated after construction.
    """

    def __init__(self, url: httpx.URL, html: str) -> None:
        self._url = url
        # html5lib builds the tree the way browsers do, repairing broken markup.
        self._document = BeautifulSoup(html, "html5lib")
        self._selector = _ANCHOR_SELECTOR

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    async def fetch(cls, url: str) -> UrlScraper:
        """Fetch *url* with a freshly built default client."""
        base = parse_url(url)
        async with default_client() as client:
            return await cls._fetch_parsed(base, client)

    @classmethod
    async def fetch_with_client(cls, url: str, client: httpx.AsyncClient) -> UrlScraper:
        """Fetch *url* with an existing ``httpx.AsyncClient``.

        The client is not closed; its lifecycle belongs to the caller, so one
        client can serve many scrapers.

        Raises:
            UrlParsingError: If *url* is not a valid absolute URL.  Raised
                before any request is made.
            RequestError: If the request fails at the transport level.  The
                HTTP status code is not checked.
        """
        return await cls._fetch_parsed(parse_url(url), client)

    @classmethod
    def from_html(cls, url: str, html: str) -> UrlScraper:
        """Build a scraper from HTML that has already been fetched.

        No network access happens; *url* is only used to resolve relative
        links.
        """
        return cls(parse_url(url), html)

    @classmethod
    async def _fetch_parsed(cls, url: httpx.URL, client: httpx.AsyncClient) -> UrlScraper:
        html = await fetch_html(url, client)
        return cls(url, html)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def url(self) -> httpx.URL:
        """Base URL that relative hrefs are resolved against."""
        return self._url

    @property
    def document(self) -> BeautifulSoup:
        return self._document

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def links(self) -> Iterator[Link]:
        """Yield a :class:`Link` for every usable ``<a>`` in document order.

        Anchors are skipped when they have no ``href``, when the ``href``
        starts with ``?``, or when it cannot be joined onto the base URL.
        The text is the anchor's inner HTML, nested tags included.
        """
        for anchor in self._selector.iselect(self._document):
            href = anchor.get("href")
            if href is None:
                continue
            if href.startswith("?"):
                logger.debug("skipping query-only href %r", href)
                continue
            resolved = _resolve(self._url, href)
            if resolved is None:
                logger.debug("skipping unresolvable href %r", href)
                continue
            yield Link(anchor.decode_contents(formatter=_INNER_HTML), resolved)

    def __iter__(self) -> Iterator[Link]:
        return self.links()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={str(self._url)!r})"
