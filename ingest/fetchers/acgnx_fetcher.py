from __future__ import annotations

import html
import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING
from urllib.parse import quote

from ingest.fetchers.http import http_get

if TYPE_CHECKING:
    from ingest.registry import ProviderConfig

logger = logging.getLogger(__name__)

_ITEM_MARKER_RE = re.compile(r"<item(?:\s[^>]*)?>")
_MAGNET_ENCLOSURE_RE = re.compile(r"<enclosure\b[^>]*?\burl=\"(magnet:[^\"]+)\"")
# encodeURIComponent leaves these unescaped besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


@lru_cache(maxsize=32)
def _tag_patterns(tag_name: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    tag = re.escape(tag_name)
    cdata = re.compile(rf"<{tag}><!\[CDATA\[(.*?)\]\]></{tag}>", re.DOTALL)
    plain = re.compile(rf"<{tag}>(.*?)</{tag}>")
    return cdata, plain


def build_search_url(api_url: str, query: str) -> str:
    return f"{api_url}?keyword={quote(query, safe=_URI_COMPONENT_SAFE)}"


def split_items(xml: str) -> list[str]:
    """Return one fragment per ``<item>`` entry, dropping the channel header."""
    parts = _ITEM_MARKER_RE.split(xml)
    return parts[1:]


def get_tag_content(fragment: str, tag_name: str) -> str:
    cdata_re, plain_re = _tag_patterns(tag_name)
    match = cdata_re.search(fragment)
    if match:
        return match.group(1)

    # <link> and <pubDate> are not CDATA-wrapped
    match = plain_re.search(fragment)
    if match:
        return html.unescape(match.group(1))
    return ""


def get_magnet_link(fragment: str) -> str:
    match = _MAGNET_ENCLOSURE_RE.search(fragment)
    return html.unescape(match.group(1)) if match else ""


def extract_item(fragment: str) -> dict[str, str]:
    return {
        "title": get_tag_content(fragment, "title"),
        "link": get_tag_content(fragment, "link"),
        "pubDate": get_tag_content(fragment, "pubDate"),
        "description": get_tag_content(fragment, "description"),
        "magnet": get_magnet_link(fragment),
    }


class AcgnxFetcher:
    def __init__(self, config: ProviderConfig) -> None:
        self.config = config

    def search_url(self, query: str) -> str:
        return build_search_url(self.config.api_url, query)

    def latest_url(self) -> str:
        return self.config.api_url

    def fetch_text(self, url: str) -> str:
        response = http_get(url, headers={"User-Agent": self.config.user_agent}, timeout=self.config.timeout)
        logger.debug("Fetched %d bytes from %s", len(response.content), url)
        return response.text
