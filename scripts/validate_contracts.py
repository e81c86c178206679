#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator, FormatChecker, ValidationError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from provider_contracts.models import CONTRACT_MODEL_MAP, load_schema


def validate_schema_definitions() -> None:
    for contract_name in CONTRACT_MODEL_MAP:
        Draft7Validator.check_schema(load_schema(contract_name))


def iter_payloads(document: Any) -> list[dict[str, Any]]:
    """Accept a single payload, a list of payloads, or an ``acgnx-provider`` report."""
    if isinstance(document, dict) and isinstance(document.get("torrents"), list):
        return document["torrents"]
    if isinstance(document, list):
        return document
    return [document]


def validate_payload(contract_name: str, payload: dict[str, Any]) -> None:
    validator = Draft7Validator(schema=load_schema(contract_name), format_checker=FormatChecker())
    validator.validate(payload)
    CONTRACT_MODEL_MAP[contract_name].model_validate(payload)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate ACGNX provider payloads against their contracts")
    parser.add_argument("--contract", default="ANIME_TORRENT", choices=sorted(CONTRACT_MODEL_MAP.keys()))
    parser.add_argument("--input", type=Path, help="JSON file: one payload, a list, or CLI search/latest output")
    parser.add_argument(
        "--validate-schemas-only",
        action="store_true",
        help="Validate all JSON Schema files only",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        validate_schema_definitions()

        if args.validate_schemas_only:
            print("OK: all contract schemas are valid draft-07 schemas")
            return 0

        if not args.input:
            print("ERROR: --input is required unless --validate-schemas-only is used")
            return 2

        payloads = iter_payloads(json.loads(args.input.read_text(encoding="utf-8")))
        for payload in payloads:
            validate_payload(args.contract, payload)

        print(f"OK: {len(payloads)} {args.contract} payload(s) valid against JSON Schema and Pydantic model")
        return 0
    except (ValidationError, ValueError) as exc:
        print(f"VALIDATION ERROR: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
