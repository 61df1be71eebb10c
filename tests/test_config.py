from __future__ import annotations

import json
from pathlib import Path

import pytest

from gridlib.config import Config, load_config, resolve_config_path
from gridlib.errors import ConfigError


@pytest.fixture
def no_xdg(tmp_path, monkeypatch):
    monkeypatch.delenv("GRIDEDIT_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "etc"))
    return tmp_path


def test_defaults_without_any_config(no_xdg, monkeypatch):
    monkeypatch.chdir(no_xdg)
    assert resolve_config_path() is None
    cfg = load_config()
    assert cfg.source_path is None
    assert cfg.dictionary_path.resolve() == (no_xdg / "dictionary.txt").resolve()
    assert cfg.quit_key == "escape"
    assert (cfg.highlight.background, cfg.highlight.foreground) == ("white", "black")


def test_explicit_missing_path_is_an_error(tmp_path, monkeypatch):
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(tmp_path / "missing.yaml"))
    with pytest.raises(ConfigError):
        load_config()


def test_xdg_home_config_with_env_expansion(no_xdg, monkeypatch):
    cfg_dir = no_xdg / "home" / "gridedit"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yaml").write_text(
        """
version: 1
dictionary_path: ${WORDS_DIR}/words.txt
quit_key: Q
highlight:
  background: Cyan
        """.strip()
    )
    monkeypatch.setenv("WORDS_DIR", "/srv/words")

    cfg = load_config()
    assert cfg.source_path == cfg_dir / "config.yaml"
    assert cfg.dictionary_path == Path("/srv/words/words.txt")
    assert cfg.quit_key == "q"
    assert cfg.highlight.background == "cyan"
    assert cfg.highlight.foreground == "black"


def test_invalid_yaml(tmp_path, monkeypatch):
    bad = tmp_path / "config.yaml"
    bad.write_text("highlight: [unclosed\n")
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(bad))
    with pytest.raises(ConfigError):
        load_config()


def test_non_mapping_yaml(tmp_path):
    bad = tmp_path / "config.yaml"
    bad.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(bad)


def test_to_json():
    data = json.loads(Config(dictionary_path=Path("/w.txt")).to_json())
    assert data["dictionary_path"] == "/w.txt"
    assert data["highlight"] == {"background": "white", "foreground": "black"}


def test_unknown_highlight_colour_is_rejected(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("highlight:\n  background: notacolour\n")
    with pytest.raises(ConfigError) as info:
        load_config(cfg)
    assert "highlight.background" in str(info.value)


def test_highlight_accepts_names_and_hex(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("highlight:\n  background: '#FF8800'\n  foreground: Purple\n")
    loaded = load_config(cfg)
    assert loaded.highlight.background == "#ff8800"
    assert loaded.highlight.foreground == "purple"


def test_highlight_must_be_a_mapping(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("highlight: white\n")
    with pytest.raises(ConfigError):
        load_config(cfg)
