from __future__ import annotations

import math
import re
from collections.abc import Iterable

from ingest.fetchers.common import parse_datetime, strip_markup
from ingest.title_parser import TitleParser
from provider_contracts.models import DEFAULT_FORMATTED_SIZE, UNKNOWN_COUNT, AnimeTorrent

SIZE_RE = re.compile(r"(?:(?<![\d.,])\d{1,3}(?:,\d{3})+(?:\.\d+)?|(?<![\d.,])\d+(?:\.\d+)?)\s*[KMGT]i?B(?![A-Za-z])", re.IGNORECASE)
MAGNET_HASH_RE = re.compile(r"urn:btih:([a-fA-F0-9]{40})")
HEX_HASH_RE = re.compile(r"^[a-fA-F0-9]{40}$")
_NON_NUMERIC_RE = re.compile(r"[^0-9.]")

# First unit found in the lower-cased size string wins.
UNIT_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("tb", 1024**4),
    ("tib", 1024**4),
    ("gb", 1024**3),
    ("gib", 1024**3),
    ("mb", 1024**2),
    ("mib", 1024**2),
    ("kb", 1024),
    ("kib", 1024),
)


def description_parts(description: str) -> list[str]:
    return [part.strip() for part in strip_markup(description).split("|")]


def find_formatted_size(parts: Iterable[str]) -> str:
    for part in parts:
        match = SIZE_RE.search(part)
        if match:
            return match.group(0)
    return DEFAULT_FORMATTED_SIZE


def hash_from_magnet(magnet: str) -> str | None:
    match = MAGNET_HASH_RE.search(magnet)
    return match.group(1) if match else None


def find_info_hash(magnet: str, parts: Iterable[str]) -> str:
    info_hash = hash_from_magnet(magnet)
    if info_hash is None:
        info_hash = next((part.strip() for part in parts if HEX_HASH_RE.match(part.strip())), "")
    return info_hash.lower()


def parse_size_to_bytes(size_str: str) -> int:
    """Convert a size such as ``"1.5GB"`` to bytes using binary multiples.

    Unitless values pass through unscaled; unparseable numbers count as zero.
    The result is rounded half-up to an integer.
    """
    if not size_str:
        return 0
    size_lower = size_str.lower()
    try:
        value = float(_NON_NUMERIC_RE.sub("", size_str))
    except ValueError:
        value = 0.0

    multiplier = 1
    for unit, unit_multiplier in UNIT_MULTIPLIERS:
        if unit in size_lower:
            multiplier = unit_multiplier
            break
    return int(math.floor(value * multiplier + 0.5))


def first_episode_number(episodes: list[str]) -> int:
    if episodes and episodes[0].strip().isdigit():
        return int(episodes[0])
    return -1


def normalize_item_to_torrent(item: dict[str, str], *, title_parser: TitleParser) -> AnimeTorrent:
    title = strip_markup(item.get("title", ""))
    magnet_link = item.get("magnet", "")
    parts = description_parts(item.get("description", ""))
    formatted_size = find_formatted_size(parts)
    metadata = title_parser.parse(title)

    return AnimeTorrent(
        name=title,
        published_at=parse_datetime(item.get("pubDate")),
        size_bytes=parse_size_to_bytes(formatted_size),
        formatted_size=formatted_size,
        seeder_count=UNKNOWN_COUNT,
        leecher_count=UNKNOWN_COUNT,
        download_count=UNKNOWN_COUNT,
        page_link=item.get("link", "").strip(),
        download_url="",
        magnet_link=magnet_link,
        info_hash=find_info_hash(magnet_link, parts),
        resolution=metadata.video_resolution or "",
        episode_number=first_episode_number(metadata.episode_number),
        release_group=metadata.release_group or "",
        is_batch=len(metadata.episode_number) > 1,
        is_best_release=False,
        confirmed=False,
    )
