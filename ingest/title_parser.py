"""Title metadata parsing for anime release names.

Release titles on ACGNX look like ``[SubsPlease] Sousou no Frieren - 05 (1080p) [A1B2C3D4].mkv``
or ``【喵萌奶茶屋】★10月新番★[葬送的芙莉莲][05][1080p][简日双语]``. A parser only has to recover the
episode number(s), the video resolution and the release group; anything it cannot find is left
empty. Parsers must never raise for arbitrary input.
"""

from __future__ import annotations

import re
from typing import Protocol

from provider_contracts.models import TitleMetadata

_EXTENSION_RE = re.compile(r"\.(?:mkv|mp4|avi|ts|m2ts|rmvb|torrent)$", re.IGNORECASE)
_LEADING_GROUP_RE = re.compile(r"^\s*[\[【]([^\]】]+)[\]】]")
_TRAILING_GROUP_RE = re.compile(r"-([A-Za-z0-9]+)$")
_RESOLUTION_RE = re.compile(
    r"(?<![0-9])(?:(?P<height>2160|1440|1080|720|576|480|360)(?P<scan>[pPiI])"
    r"|(?P<width>\d{3,4})[xX×](?P<h>\d{3,4})"
    r"|(?P<k>[48])[kK])(?![0-9A-Za-z])"
)
_RANGE_RES = (
    re.compile(r"[\[【]\s*(\d{1,4})\s*[-~～]\s*(\d{1,4})\s*(?:END|Fin|完)?\s*[\]】]", re.IGNORECASE),
    re.compile(r"第\s*(\d{1,4})\s*[-~～]\s*(\d{1,4})\s*[话話集]"),
    re.compile(r"\s-\s(\d{1,3})\s*[-~～]\s*(\d{1,3})(?![0-9])"),
)
_SINGLE_RES = (
    re.compile(r"(?<![A-Za-z0-9])S\d{1,2}E(\d{1,4})(?![0-9])", re.IGNORECASE),
    re.compile(r"(?<![A-Za-z0-9])(?:EP|Episode)\s?\.?\s?(\d{1,4})(?![0-9])", re.IGNORECASE),
    re.compile(r"第\s*(\d{1,4})\s*[话話集]"),
    re.compile(r"\s-\s(\d{1,3})(?:v\d)?(?![0-9A-Za-z])"),
    re.compile(r"[\[【](\d{1,3})(?:v\d)?(?:\s*END)?[\]】]", re.IGNORECASE),
)


class TitleParser(Protocol):
    def parse(self, title: str) -> TitleMetadata: ...


class RegexTitleParser:
    """Default :class:`TitleParser` built from release-name conventions."""

    def parse(self, title: str) -> TitleMetadata:
        if not title:
            return TitleMetadata()
        text = _EXTENSION_RE.sub("", title.strip())
        return TitleMetadata(
            episode_number=_episode_numbers(text),
            video_resolution=_resolution(text),
            release_group=_release_group(text),
        )


def _episode_numbers(text: str) -> list[str]:
    for pattern in _RANGE_RES:
        match = pattern.search(text)
        if match and int(match.group(1)) < int(match.group(2)):
            return [match.group(1), match.group(2)]
    for pattern in _SINGLE_RES:
        match = pattern.search(text)
        if match:
            return [match.group(1)]
    return []


def _resolution(text: str) -> str:
    match = _RESOLUTION_RE.search(text)
    if not match:
        return ""
    if match.group("height"):
        return f"{match.group('height')}{match.group('scan').lower()}"
    if match.group("width"):
        return f"{match.group('width')}x{match.group('h')}"
    return f"{match.group('k')}K"


def _release_group(text: str) -> str:
    match = _LEADING_GROUP_RE.match(text)
    if match:
        candidate = match.group(1).strip()
        if candidate and not candidate.isdigit() and not _RESOLUTION_RE.fullmatch(candidate):
            return candidate
        return ""
    if " " in text:
        return ""
    match = _TRAILING_GROUP_RE.search(text)
    return match.group(1) if match else ""
