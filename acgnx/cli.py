from __future__ import annotations

import argparse
import json
import logging

from ingest.provider import AcgnxProvider
from ingest.registry import load_config
from ingest.validation import validate_torrent_contract
from provider_contracts.models import AnimeTorrent, SearchOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ACGNX RSS torrent provider CLI")
    parser.add_argument("--config", default=None, help="Provider YAML config (default: ingest/provider.yaml)")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("settings", help="Print the provider capability descriptor")

    search = subparsers.add_parser("search", help="Search the feed by keyword")
    search.add_argument("--query", required=True)

    subparsers.add_parser("latest", help="List the latest feed entries")

    return parser


def _report(torrents: list[AnimeTorrent]) -> dict:
    payloads: list[dict] = []
    failures: list[dict[str, str]] = []
    for torrent in torrents:
        try:
            validate_torrent_contract(torrent)
        except Exception as exc:  # noqa: BLE001
            failures.append({"name": torrent.name, "error": f"validation: {exc}"})
            continue
        payloads.append(torrent.to_dict())

    return {
        "count": len(payloads),
        "torrents": payloads,
        "failed_count": len(failures),
        "failures": failures,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    provider = AcgnxProvider(load_config(args.config))

    if args.command == "settings":
        print(provider.get_settings().to_json())
        return 0

    if args.command == "search":
        print(json.dumps(_report(provider.search(SearchOptions(query=args.query)))))
        return 0

    if args.command == "latest":
        print(json.dumps(_report(provider.get_latest())))
        return 0

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
