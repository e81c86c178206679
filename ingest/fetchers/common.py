from __future__ import annotations

import datetime as dt
import email.utils

from bs4 import BeautifulSoup


def parse_datetime(value: str | None) -> dt.datetime | None:
    if not value:
        return None
    value = value.strip()

    # RSS-style dates
    try:
        parsed = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError):
        parsed = None
    if parsed:
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=dt.timezone.utc)

    # ISO-8601, including fractional seconds and a trailing "Z"
    iso_value = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = dt.datetime.fromisoformat(iso_value)
    except ValueError:
        parsed = None
    if parsed:
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=dt.timezone.utc)

    for fmt in (
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d",
    ):
        try:
            parsed_dt = dt.datetime.strptime(value, fmt)
            if parsed_dt.tzinfo is None:
                parsed_dt = parsed_dt.replace(tzinfo=dt.timezone.utc)
            return parsed_dt
        except ValueError:
            continue

    return None


def strip_markup(value: str) -> str:
    """Drop embedded tags such as ``<a href=...>`` and trim the remaining text."""
    if "<" not in value:
        return value.strip()
    return BeautifulSoup(value, "html.parser").get_text().strip()
