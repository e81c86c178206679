from __future__ import annotations

import pytest

from ingest.title_parser import RegexTitleParser

parser = RegexTitleParser()


@pytest.mark.parametrize(
    "title, episodes, resolution, group",
    [
        ("[SubsPlease] Sousou no Frieren - 05 (1080p) [A1B2C3D4].mkv", ["05"], "1080p", "SubsPlease"),
        ("【喵萌奶茶屋】★10月新番★[葬送的芙莉莲][06][720p][简日双语]", ["06"], "720p", "喵萌奶茶屋"),
        ("[LoliHouse] Spy x Family [01-12][WebRip 1080p HEVC-10bit AAC]", ["01", "12"], "1080p", "LoliHouse"),
        ("[桜都字幕组] 葬送的芙莉莲 第01-28话 [1920x1080]", ["01", "28"], "1920x1080", "桜都字幕组"),
        ("[Erai-raws] Dandadan - 07v2 [1080P]", ["07"], "1080p", "Erai-raws"),
        ("Frieren.Beyond.Journeys.End.S01E07.2160p.WEB-DL.x265-NTb", ["07"], "2160p", "NTb"),
        ("[ANi] Dandadan EP 11 [4K]", ["11"], "4K", "ANi"),
        ("[1080p] Some Movie", [], "1080p", ""),
        ("[G] Movie - 2024 [1080p]", [], "1080p", "G"),
        ("Untitled pack", [], "", ""),
    ],
)
def test_regex_title_parser(title, episodes, resolution, group) -> None:
    metadata = parser.parse(title)
    assert metadata.episode_number == episodes
    assert metadata.video_resolution == resolution
    assert metadata.release_group == group


def test_descending_range_is_not_a_batch() -> None:
    assert parser.parse("[Group] Show [2024-10]").episode_number != ["2024", "10"]


@pytest.mark.parametrize("title", ["", "   ", "[", "【】", "]]]>>>", "- - -", "第话", "\x00￿"])
def test_parser_never_raises_for_odd_input(title) -> None:
    metadata = parser.parse(title)
    assert isinstance(metadata.episode_number, list)
