from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from tabulate import tabulate

from gridlib.config import Config, ConfigError, load_config
from gridlib.dictionary import load_dictionary
from gridlib.errors import (
    DictionaryError,
    format_config_error,
    format_error_message,
    suggest_troubleshooting_steps,
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--json-output",
    "json_output",
    is_flag=True,
    help="Output JSON instead of tables (pretty-printed)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging to stderr (what the CLI is doing)",
)
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool) -> None:
    """Terminal 5x5 grid editor.

    Configuration is optional and loaded via XDG or the GRIDEDIT_CONFIG
    environment variable. JSON output is always pretty-printed.
    """
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    ctx.obj["verbose"] = verbose

    # Configure logging once per process
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _load_config(log: logging.Logger) -> Config:
    try:
        log.info("Loading config...")
        cfg = load_config()
        log.info("Loaded config from %s", cfg.source_path or "<defaults>")
    except ConfigError as e:
        click.echo(format_config_error(e), err=True)
        raise SystemExit(2)
    return cfg


@cli.command()
@click.option(
    "--dictionary",
    "dictionary_path",
    type=click.Path(path_type=Path),
    help="Word list to load; defaults to ./dictionary.txt",
)
@click.pass_context
def edit(ctx: click.Context, dictionary_path: Optional[Path]) -> None:
    """Launch the interactive board editor."""
    cfg = _load_config(logging.getLogger("gridctl.edit"))
    try:
        from gridtui.app import run_tui
        status = run_tui(config=cfg, dictionary_path=dictionary_path)
    except ImportError as e:
        click.echo(f"TUI dependencies not available: {e}", err=True)
        raise SystemExit(1)
    except Exception as e:
        error_msg = format_error_message("run the editor", e, {})
        click.echo(error_msg, err=True)
        raise SystemExit(1)
    if status:
        raise SystemExit(status)


# BOARD commands


@cli.group()
@click.pass_context
def board(ctx: click.Context) -> None:  # noqa: D401
    """Board commands."""
    pass


@board.command("show")
@click.option(
    "-k",
    "--key",
    "keys",
    multiple=True,
    help="Key to replay before showing (left, right, up, down, enter, escape or a character); repeatable",
)
@click.option("--plain", is_flag=True, help="Mark the selected cell with brackets instead of colours")
@click.pass_context
def board_show(ctx: click.Context, keys: Tuple[str, ...], plain: bool) -> None:
    """Show a fresh board, optionally after replaying key presses."""
    from gridtui.key_parser import KeyParser
    from gridtui.models.editor_state import EditorState

    log = logging.getLogger("gridctl.board")
    cfg = _load_config(log)

    editor = EditorState()
    log.info("Replaying %d keys", len(keys))
    editor.replay(keys, KeyParser(quit_key=cfg.quit_key))
    x, y = editor.cursor.as_tuple()

    if ctx.obj.get("json"):
        out = {
            "rows": ["".join(row) for row in editor.board.rows()],
            "cursor": {"x": x, "y": y},
            "state": editor.state.value,
        }
        click.echo(json.dumps(out, indent=2, sort_keys=True))
        return

    if plain:
        click.echo(editor.board.render_plain(x, y), nl=False)
        return

    log.info("Rendering board with cursor at (%d, %d)", x, y)
    editor.board.display(sys.stdout, x, y, highlight=cfg.highlight)


# DICTIONARY commands


@cli.group()
@click.pass_context
def dictionary(ctx: click.Context) -> None:  # noqa: D401
    """Dictionary commands."""
    pass


@dictionary.command("info")
@click.option(
    "--dictionary",
    "dictionary_path",
    type=click.Path(path_type=Path),
    help="Word list to load; defaults to the configured dictionary_path",
)
@click.pass_context
def dictionary_info(ctx: click.Context, dictionary_path: Optional[Path]) -> None:
    """Load the dictionary and report how many words it holds."""
    log = logging.getLogger("gridctl.dictionary")
    cfg = _load_config(log)
    path = dictionary_path or cfg.dictionary_path

    try:
        log.info("Loading dictionary from %s", path)
        words = load_dictionary(path)
        log.info("Found %d words", len(words))
    except DictionaryError as e:  # surface helpful error without stack
        error_msg = format_error_message("load dictionary", e, {"path": path})
        click.echo(error_msg, err=True)
        if ctx.obj.get("verbose"):
            suggestions = suggest_troubleshooting_steps("load dictionary", e)
            if suggestions:
                click.echo("\nTroubleshooting suggestions:", err=True)
                for suggestion in suggestions[:3]:  # Show top 3 suggestions
                    click.echo(f"  • {suggestion}", err=True)
        raise SystemExit(2)

    if ctx.obj.get("json"):
        out = {"path": str(path), "words": len(words)}
        click.echo(json.dumps(out, indent=2, sort_keys=True))
        return

    rows = [
        ["path", str(path)],
        ["words", len(words)],
    ]
    click.echo(tabulate(rows, headers=["FIELD", "VALUE"]))


# CONFIG commands


@cli.group()
@click.pass_context
def config(ctx: click.Context) -> None:  # noqa: D401
    """Configuration commands."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    log = logging.getLogger("gridctl.config")
    cfg = _load_config(log)

    if ctx.obj.get("json"):
        click.echo(cfg.to_json())
        return

    rows = [
        ["source", str(cfg.source_path) if cfg.source_path else "—"],
        ["dictionary_path", str(cfg.dictionary_path)],
        ["log_file", str(cfg.log_file)],
        ["quit_key", cfg.quit_key],
        ["highlight", f"{cfg.highlight.foreground} on {cfg.highlight.background}"],
    ]
    log.info("Rendering config from %s", cfg.source_path or "<defaults>")
    click.echo(tabulate(rows, headers=["FIELD", "VALUE"]))


def main() -> None:  # entry point
    cli(standalone_mode=True)


if __name__ == "__main__":  # pragma: no cover
    main()
