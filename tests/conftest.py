from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FEEDS_DIR = ROOT / "tests" / "fixtures" / "feeds"


@pytest.fixture
def latest_feed() -> str:
    return (FEEDS_DIR / "acgnx_latest.xml").read_text(encoding="utf-8")


@pytest.fixture
def fake_feed(monkeypatch, latest_feed):
    """Serve the latest feed fixture instead of hitting the network; records requested URLs."""
    from ingest.fetchers.http import HTTPResponse

    requested: list[str] = []

    def fake_get(url, *args, **kwargs):
        requested.append(url)
        data = latest_feed.encode("utf-8")
        return HTTPResponse(status=200, text=latest_feed, content=data)

    monkeypatch.setattr("ingest.fetchers.acgnx_fetcher.http_get", fake_get)
    return requested
