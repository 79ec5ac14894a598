import json

import pytest

from headerbind.core.config import BindConfig, get_bind_config, load_config_file
from headerbind.core.errors import ConfigError


def test_defaults():
    cfg = get_bind_config()
    assert cfg == BindConfig(tag="header", skip_marker="-", overflow="error")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HEADERBIND_TAG", "hdr")
    monkeypatch.setenv("HEADERBIND_OVERFLOW", "WRAP")
    cfg = get_bind_config()
    assert cfg.tag == "hdr"
    assert cfg.overflow == "wrap"


def test_invalid_overflow(monkeypatch):
    monkeypatch.setenv("HEADERBIND_OVERFLOW", "saturate")
    with pytest.raises(ConfigError):
        get_bind_config()


def test_empty_tag_rejected():
    with pytest.raises(ConfigError):
        BindConfig(tag="")


def test_yaml_file(tmp_path):
    f = tmp_path / "headerbind.yaml"
    f.write_text("tag: hdr\noverflow: wrap\n", encoding="utf-8")
    cfg = get_bind_config(f)
    assert cfg.tag == "hdr"
    assert cfg.overflow == "wrap"


def test_json_file_via_env(tmp_path, monkeypatch):
    f = tmp_path / "headerbind.json"
    f.write_text(json.dumps({"overflow": "wrap"}), encoding="utf-8")
    monkeypatch.setenv("HEADERBIND_CONFIG_FILE", str(f))
    assert get_bind_config().overflow == "wrap"


def test_env_wins_over_file(tmp_path, monkeypatch):
    f = tmp_path / "headerbind.yaml"
    f.write_text("overflow: wrap\n", encoding="utf-8")
    monkeypatch.setenv("HEADERBIND_OVERFLOW", "error")
    assert get_bind_config(f).overflow == "error"


def test_missing_file_uses_defaults(tmp_path, caplog):
    cfg = get_bind_config(tmp_path / "nope.yaml")
    assert cfg == BindConfig()
    assert "does not exist" in caplog.text


def test_non_mapping_file(tmp_path):
    f = tmp_path / "list.json"
    f.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(f)


def test_malformed_file(tmp_path):
    f = tmp_path / "bad.yaml"
    f.write_text("this: is: not: valid: yaml:\n  {{{{", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(f)


def test_empty_file(tmp_path):
    f = tmp_path / "empty.yaml"
    f.write_text("", encoding="utf-8")
    assert load_config_file(f) == {}
