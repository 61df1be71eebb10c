"""Core library for the grid editor.

Contains the board model, dictionary loading, configuration and error
formatting shared by the CLI and the TUI.
"""

__all__ = [
    "board",
    "config",
    "dictionary",
    "errors",
]
