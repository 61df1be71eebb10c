from __future__ import annotations

import json
import re
from pathlib import Path

from click.testing import CliRunner

from gridctl.cli import cli


def write_config(tmp_path: Path) -> Path:
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        """
version: 1
highlight:
  background: white
  foreground: black
        """.strip()
    )
    return cfg


def test_board_show_json_after_keys(tmp_path, monkeypatch):
    cfg = write_config(tmp_path)
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(cfg))

    runner = CliRunner()
    res = runner.invoke(cli, ["--json-output", "board", "show", "-k", "right", "-k", "down", "-k", "z"])  # type: ignore[arg-type]
    assert res.exit_code == 0, res.output
    data = json.loads(res.output)
    assert data["cursor"] == {"x": 1, "y": 1}
    assert data["rows"] == ["ABCDE", "FZHIJ", "KLMNO", "PQRST", "UVWXY"]
    assert data["state"] == "running"


def test_board_show_ansi(tmp_path, monkeypatch):
    cfg = write_config(tmp_path)
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(cfg))
    monkeypatch.delenv("NO_COLOR", raising=False)

    runner = CliRunner()
    res = runner.invoke(cli, ["board", "show"])  # type: ignore[arg-type]
    assert res.exit_code == 0, res.output
    assert "\x1b[30;47mA\x1b[0m" in res.output
    plain = re.sub(r"\x1b\[[0-9;]*[A-Za-z]", "", res.output)
    assert plain.splitlines()[4] == "U V W X Y"


def test_board_show_plain_with_escape(tmp_path, monkeypatch):
    cfg = write_config(tmp_path)
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(cfg))

    runner = CliRunner()
    res = runner.invoke(cli, ["board", "show", "--plain", "-k", "down", "-k", "escape", "-k", "q"])  # type: ignore[arg-type]
    assert res.exit_code == 0, res.output
    assert res.output.splitlines() == [
        "A B C D E",
        "[F] G H I J",
        "K L M N O",
        "P Q R S T",
        "U V W X Y",
    ]


def test_config_error_exits_2(tmp_path, monkeypatch):
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(tmp_path / "missing.yaml"))

    runner = CliRunner()
    res = runner.invoke(cli, ["board", "show"])  # type: ignore[arg-type]
    assert res.exit_code == 2
    assert "GRIDEDIT_CONFIG" in res.output


def test_bad_highlight_colour_exits_2(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("highlight:\n  foreground: notacolour\n")
    monkeypatch.setenv("GRIDEDIT_CONFIG", str(cfg))

    runner = CliRunner()
    res = runner.invoke(cli, ["board", "show"])  # type: ignore[arg-type]
    assert res.exit_code == 2
    assert "highlight.foreground" in res.output
