from __future__ import annotations

import json
import datetime as dt
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

CONTRACT_VERSION = "v1.0"
CONTRACTS_DIR = Path(__file__).resolve().parent.parent / "contracts" / CONTRACT_VERSION

UNKNOWN_COUNT = -1
DEFAULT_FORMATTED_SIZE = "0 MB"


class ContractBaseModel(BaseModel):
    """Base class with common serialization helpers for provider contracts.

    Attributes are snake_case in Python and camelCase on the wire, matching
    the torrent payloads the aggregation host consumes.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(indent=indent, by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ContractBaseModel":
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls, payload: str) -> "ContractBaseModel":
        return cls.model_validate_json(payload)


class ProviderSettings(ContractBaseModel):
    can_smart_search: bool = Field(default=False, alias="canSmartSearch")
    smart_search_filters: list[str] = Field(default_factory=list, alias="smartSearchFilters")
    supports_adult: bool = Field(default=True, alias="supportsAdult")
    type: Literal["main", "special"] = "main"


class ANIME_TORRENT(ContractBaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    published_at: dt.datetime | None = Field(default=None, alias="date")
    size_bytes: int = Field(default=0, ge=0, alias="size")
    formatted_size: str = Field(default=DEFAULT_FORMATTED_SIZE, alias="formattedSize")
    seeder_count: int = Field(default=UNKNOWN_COUNT, ge=-1, alias="seeders")
    leecher_count: int = Field(default=UNKNOWN_COUNT, ge=-1, alias="leechers")
    download_count: int = Field(default=UNKNOWN_COUNT, ge=-1, alias="downloadCount")
    page_link: str = Field(default="", alias="link")
    download_url: str = Field(default="", alias="downloadUrl")
    magnet_link: str = Field(alias="magnetLink")
    info_hash: str = Field(default="", pattern=r"^([0-9a-f]{40})?$", alias="infoHash")
    resolution: str = ""
    episode_number: int = Field(default=-1, ge=-1, alias="episodeNumber")
    release_group: str = Field(default="", alias="releaseGroup")
    is_batch: bool = Field(default=False, alias="isBatch")
    is_best_release: bool = Field(default=False, alias="isBestRelease")
    confirmed: bool = False


AnimeTorrent = ANIME_TORRENT


class TitleMetadata(BaseModel):
    episode_number: list[str] = Field(default_factory=list)
    video_resolution: str = ""
    release_group: str = ""


class SearchOptions(BaseModel):
    query: str


class SmartSearchOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    query: str | None = None


CONTRACT_MODEL_MAP: dict[str, type[ContractBaseModel]] = {
    "ANIME_TORRENT": ANIME_TORRENT,
    "PROVIDER_SETTINGS": ProviderSettings,
}


def schema_path(contract_name: str) -> Path:
    return CONTRACTS_DIR / f"{contract_name}.schema.json"


def load_schema(contract_name: str) -> dict[str, Any]:
    path = schema_path(contract_name)
    return json.loads(path.read_text(encoding="utf-8"))


def serialize_contract(contract: ContractBaseModel) -> str:
    return contract.to_json()


def deserialize_contract(contract_name: str, payload: str | dict[str, Any]) -> ContractBaseModel:
    model_cls = CONTRACT_MODEL_MAP[contract_name]
    if isinstance(payload, str):
        return model_cls.from_json(payload)
    return model_cls.from_dict(payload)
