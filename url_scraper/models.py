"""Data models for extracted links."""

from __future__ import annotations

from typing import NamedTuple

import httpx


class Link(NamedTuple):
    """A single hyperlink: the anchor's inner HTML and its absolute URL.

    Being a tuple, it unpacks directly: ``for text, url in scraper: ...``.
    """

    text: str
    url: httpx.URL
