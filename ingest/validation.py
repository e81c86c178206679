from __future__ import annotations

from jsonschema import Draft7Validator, FormatChecker

from provider_contracts.models import ANIME_TORRENT, load_schema


def validate_torrent_contract(torrent: ANIME_TORRENT) -> None:
    payload = torrent.to_dict()
    validator = Draft7Validator(schema=load_schema("ANIME_TORRENT"), format_checker=FormatChecker())
    validator.validate(payload)
    ANIME_TORRENT.model_validate(payload)
