from __future__ import annotations

from pathlib import Path

import pytest

import util.utils as utils


def test_load_config_merges_root_over_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "canvas:\n  fps: 60\ndots:\n  speed: 5\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("canvas:\n  fps: 30\n", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)
    cfg = utils.load_config()
    # トップレベル単位の上書き
    assert cfg["canvas"] == {"fps": 30}
    assert cfg["dots"] == {"speed": 5}


def test_invalid_yaml_is_fail_soft(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("canvas: [unclosed\n", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)
    assert utils.load_config() == {}
    assert any("failed to read config" in r.getMessage() for r in caplog.records)


def test_missing_files_give_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)
    assert utils.load_config() == {}


def test_config_section() -> None:
    assert utils.config_section({"a": {"b": 1}}, "a") == {"b": 1}
    assert utils.config_section({"a": 3}, "a") == {}
    assert utils.config_section({}, "a") == {}
