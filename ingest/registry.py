from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_URL = "https://share.acgnx.se/rss.xml"
USER_AGENT = "acgnx-provider/0.1 (+https://example.local)"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "provider.yaml"


@dataclass(slots=True)
class ProviderConfig:
    api_url: str = DEFAULT_API_URL
    user_agent: str = USER_AGENT
    timeout: float = 20
    supports_adult: bool = True

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ProviderConfig":
        normalized = dict(payload)

        if normalized.get("url") is not None and normalized.get("api_url") is None:
            normalized["api_url"] = normalized["url"]
        if normalized.get("timeout_seconds") is not None and normalized.get("timeout") is None:
            normalized["timeout"] = normalized["timeout_seconds"]

        known = {field.name for field in fields(cls)}
        return cls(**{key: value for key, value in normalized.items() if key in known})


def load_config(path: str | Path | None = None) -> ProviderConfig:
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    raw_text = config_path.read_text(encoding="utf-8")
    payload = yaml.safe_load(raw_text) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Provider config '{config_path}' must be a mapping, got {type(payload).__name__}")
    return ProviderConfig.from_dict(payload)
