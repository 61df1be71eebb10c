from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from rich.color import Color, ColorParseError

from .errors import ConfigError


DEFAULT_LOG_FILE = Path("/tmp/gridedit_debug.log")
DICTIONARY_FILENAME = "dictionary.txt"


def default_dictionary_path() -> Path:
    return Path.cwd() / DICTIONARY_FILENAME


@dataclass
class Highlight:
    background: str = "white"
    foreground: str = "black"


@dataclass
class Config:
    version: int = 1
    dictionary_path: Path = field(default_factory=default_dictionary_path)
    log_file: Path = DEFAULT_LOG_FILE
    quit_key: str = "escape"
    highlight: Highlight = field(default_factory=Highlight)
    source_path: Optional[Path] = None

    def to_json(self) -> str:
        def _default(o: Any):
            if isinstance(o, Path):
                return str(o)
            if hasattr(o, "__dict__"):
                return o.__dict__
            return str(o)

        return json.dumps(self, default=_default, indent=2, sort_keys=True)


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        # Expand ${VAR} style
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _as_colour(name: str, raw: Any) -> str:
    colour = str(raw).strip().lower()
    try:
        Color.parse(colour)
    except ColorParseError as e:
        raise ConfigError(f"invalid highlight.{name} colour {raw!r}: {e}") from e
    return colour


def _as_highlight(raw: Any) -> Highlight:
    if not isinstance(raw, dict):
        raise ConfigError("invalid highlight section: expected a mapping")
    hl = Highlight()
    if raw.get("background"):
        hl.background = _as_colour("background", raw["background"])
    if raw.get("foreground"):
        hl.foreground = _as_colour("foreground", raw["foreground"])
    return hl


def resolve_config_path() -> Optional[Path]:
    """Find the config file, or return None when the defaults should be used.

    An explicit GRIDEDIT_CONFIG that points nowhere is an error; a missing file
    in the XDG locations is not, since the editor runs fine unconfigured.
    """
    override = os.environ.get("GRIDEDIT_CONFIG")
    if override:
        p = Path(override).expanduser()
        if p.is_file():
            return p
        raise ConfigError(f"GRIDEDIT_CONFIG path not found: {p}")

    # XDG base dirs
    xdg_home = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config")).expanduser()
    candidates = [xdg_home / "gridedit" / "config.yaml"]

    xdg_dirs = os.environ.get("XDG_CONFIG_DIRS", "/etc/xdg")
    for d in xdg_dirs.split(":"):
        if d:
            candidates.append(Path(d) / "gridedit" / "config.yaml")

    for c in candidates:
        if c.is_file():
            return c

    return None


def load_config(path: Optional[Path] = None) -> Config:
    cfg_path = path or resolve_config_path()
    if cfg_path is None:
        return Config()

    try:
        data = yaml.safe_load(cfg_path.read_text()) or {}
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {cfg_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"invalid config in {cfg_path}: expected a mapping")

    data = _expand_env(data)

    cfg = Config(
        version=int(data.get("version", 1)),
        highlight=_as_highlight(data.get("highlight") or {}),
        source_path=cfg_path,
    )
    if data.get("dictionary_path"):
        cfg.dictionary_path = Path(data["dictionary_path"]).expanduser()
    if data.get("log_file"):
        cfg.log_file = Path(data["log_file"]).expanduser()
    if data.get("quit_key"):
        cfg.quit_key = str(data["quit_key"]).strip().lower()
    return cfg
