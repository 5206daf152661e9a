from __future__ import annotations

"""
Unit tests for Configuration persistence.

Verifies:
1. Default values match the reference toolchain.
2. Loading merges known keys over defaults and never raises.
3. Saving writes a versioned document that loads back.
"""

import json
from pathlib import Path

from ponybuild.domain.config import get_default_config, load_config, save_config
from ponybuild.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_values():
    cfg = get_default_config()

    assert cfg["output_path"] == "build.ninja"
    assert cfg["builddir"] == "build"
    assert cfg["cc"] == "gcc"
    assert cfg["cflags"] == "-g -Wall"
    assert cfg["binary_suffix"] == ".exe"
    assert cfg["strict_collisions"] is False


def test_load_config_missing_file_returns_defaults(tmp_path: Path):
    assert load_config(str(tmp_path / "nope.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"config": {"cc": "clang", "bogus": 1}}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["cc"] == "clang"
    assert cfg["ar"] == "ar"
    assert "bogus" not in cfg


def test_load_config_accepts_flat_document(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"cflags": "-O2"}), encoding="utf-8")

    assert load_config(str(path))["cflags"] == "-O2"


def test_load_config_corrupted_file_falls_back(tmp_path: Path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level("ERROR"):
        cfg = load_config(str(path))

    assert cfg == get_default_config()
    assert "Failed to load config" in caplog.text


def test_load_config_non_object_falls_back(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_load_config_non_utf8_falls_back(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"cc": "\xff"}')

    assert load_config(str(path)) == get_default_config()


def test_save_config_round_trip(tmp_path: Path):
    path = tmp_path / "nested" / "config.json"
    cfg = get_default_config()
    cfg["ldflags"] = "-lm"

    assert save_config(cfg, str(path)) is True

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["version"] == CURRENT_CONFIG_VERSION
    assert load_config(str(path))["ldflags"] == "-lm"


def test_save_config_reports_failure(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    assert save_config(get_default_config(), str(blocker / "config.json")) is False
