from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "validate_contracts.py"


def test_validate_contracts_script_schema_only() -> None:
    result = subprocess.run(
        [sys.executable, str(SCRIPT), "--validate-schemas-only"],
        check=False,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "OK:" in result.stdout


def test_validate_contracts_script_accepts_cli_report(tmp_path: Path) -> None:
    report = {
        "count": 1,
        "torrents": [
            {
                "name": "[SubsPlease] Sousou no Frieren - 05 (1080p)",
                "size": 1610612736,
                "formattedSize": "1.5GB",
                "magnetLink": "magnet:?xt=urn:btih:abcdef0123456789abcdef0123456789abcdef01",
                "infoHash": "abcdef0123456789abcdef0123456789abcdef01",
            }
        ],
        "failed_count": 0,
        "failures": [],
    }
    payload_file = tmp_path / "latest.json"
    payload_file.write_text(json.dumps(report), encoding="utf-8")

    result = subprocess.run(
        [sys.executable, str(SCRIPT), "--input", str(payload_file)],
        check=False,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "1 ANIME_TORRENT" in result.stdout


def test_validate_contracts_script_rejects_bad_hash(tmp_path: Path) -> None:
    payload_file = tmp_path / "torrent.json"
    payload_file.write_text(json.dumps({"name": "x", "magnetLink": "", "infoHash": "XYZ"}), encoding="utf-8")

    result = subprocess.run(
        [sys.executable, str(SCRIPT), "--input", str(payload_file)],
        check=False,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 1
    assert "VALIDATION ERROR" in result.stdout
