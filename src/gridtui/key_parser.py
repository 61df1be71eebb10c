"""Classify terminal key events into editor actions."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyAction(Enum):
    """Actions the editor knows how to perform."""
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    SUBMIT = "enter"
    QUIT = "quit"
    WRITE = "write"
    IGNORE = "ignore"


@dataclass
class ParsedKey:
    """Result of parsing a key event."""
    action: KeyAction
    key: str
    character: Optional[str] = None


class KeyParser:
    """Parser for Textual key names."""

    # Key name aliases mapping
    ALIASES = {
        "esc": "escape",
        "return": "enter",
    }

    MOVES = {
        "left": KeyAction.MOVE_LEFT,
        "right": KeyAction.MOVE_RIGHT,
        "up": KeyAction.MOVE_UP,
        "down": KeyAction.MOVE_DOWN,
        "enter": KeyAction.SUBMIT,
    }

    def __init__(self, quit_key: str = "escape"):
        self.quit_key = self.ALIASES.get(quit_key, quit_key)

    def parse(self, key: str, character: Optional[str] = None) -> ParsedKey:
        """Parse a key name (and the character it produced, if any)."""
        key = self.ALIASES.get(key, key)

        if key == self.quit_key or (character is not None and character == self.quit_key):
            return ParsedKey(action=KeyAction.QUIT, key=key)

        if key in self.MOVES:
            return ParsedKey(action=self.MOVES[key], key=key)

        if character is not None and len(character) == 1 and character.isprintable():
            return ParsedKey(action=KeyAction.WRITE, key=key, character=character)

        return ParsedKey(action=KeyAction.IGNORE, key=key)

    def parse_name(self, name: str) -> ParsedKey:
        """Parse a key given on the command line.

        A single character stands for itself; anything longer is a key name.
        """
        if len(name) == 1:
            return self.parse(name, name)
        return self.parse(name.lower())

    def get_help_text(self) -> str:
        """Get help text for the editor keys."""
        return f"""Editor Keys:

←→↑↓      - Move the selected cell
a-z, 0-9  - Write the character (stored uppercase)
Enter     - Nothing, for now
{self.quit_key:<9} - Exit the editor
"""
