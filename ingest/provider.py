"""ACGNX torrent provider.

Every public operation returns normally: a failed fetch gives an empty list,
and an item that cannot be parsed is dropped from the results.
"""

from __future__ import annotations

import logging
from http.client import HTTPException

from ingest.fetchers.acgnx_fetcher import AcgnxFetcher, extract_item, split_items
from ingest.fetchers.http import HTTPStatusError
from ingest.normalize import normalize_item_to_torrent
from ingest.registry import ProviderConfig
from ingest.title_parser import RegexTitleParser, TitleParser
from provider_contracts.models import AnimeTorrent, ProviderSettings, SearchOptions, SmartSearchOptions

logger = logging.getLogger(__name__)


def parse_torrents_from_xml(xml: str, *, title_parser: TitleParser) -> list[AnimeTorrent]:
    torrents: list[AnimeTorrent] = []
    for index, fragment in enumerate(split_items(xml)):
        try:
            item = extract_item(fragment)
            torrents.append(normalize_item_to_torrent(item, title_parser=title_parser))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Skipping ACGNX item %d: %s", index, exc)
    return torrents


class AcgnxProvider:
    def __init__(
        self,
        config: ProviderConfig | None = None,
        *,
        title_parser: TitleParser | None = None,
        fetcher: AcgnxFetcher | None = None,
    ) -> None:
        self.config = config or ProviderConfig()
        self.title_parser = title_parser or RegexTitleParser()
        self.fetcher = fetcher or AcgnxFetcher(self.config)

    def get_settings(self) -> ProviderSettings:
        return ProviderSettings(
            can_smart_search=False,
            smart_search_filters=[],
            supports_adult=self.config.supports_adult,
            type="main",
        )

    def search(self, options: SearchOptions | str) -> list[AnimeTorrent]:
        query = options if isinstance(options, str) else options.query
        try:
            url = self.fetcher.search_url(query)
        except ValueError as exc:
            logger.error("Cannot build ACGNX search URL for %r: %s", query, exc)
            return []
        return self._fetch_and_parse(url)

    def smart_search(self, options: SmartSearchOptions | None = None) -> list[AnimeTorrent]:
        logger.info("ACGNX provider does not support smart search")
        return []

    def get_latest(self) -> list[AnimeTorrent]:
        return self._fetch_and_parse(self.fetcher.latest_url())

    def get_torrent_info_hash(self, torrent: AnimeTorrent) -> str:
        return torrent.info_hash or ""

    def get_torrent_magnet_link(self, torrent: AnimeTorrent) -> str:
        return torrent.magnet_link or ""

    def _fetch_and_parse(self, url: str) -> list[AnimeTorrent]:
        try:
            xml = self.fetcher.fetch_text(url)
        except (HTTPStatusError, HTTPException, OSError, ValueError) as exc:
            logger.error("Error fetching ACGNX RSS feed from %s: %s", url, exc)
            return []
        torrents = parse_torrents_from_xml(xml, title_parser=self.title_parser)
        logger.info("Parsed %d torrents from %s", len(torrents), url)
        return torrents
