"""The 5x5 character board and its terminal rendering."""

from __future__ import annotations

import logging
from typing import List, Optional, TextIO

from rich.console import Console
from rich.control import Control
from rich.text import Text

from .config import Highlight

logger = logging.getLogger(__name__)

WIDTH = 5
HEIGHT = 5
SIZE = WIDTH * HEIGHT

# rich has no erase-below control
CLEAR_FROM_CURSOR_DOWN = "\x1b[J"


def highlight_style(highlight: Highlight) -> str:
    return f"{highlight.foreground} on {highlight.background}"


class Board:
    """Fixed grid of single characters, stored row-major (index = y * 5 + x)."""

    def __init__(self) -> None:
        self.cells: List[str] = [chr(ord("A") + i) for i in range(SIZE)]

    @staticmethod
    def index(x: int, y: int) -> int:
        return y * WIDTH + x

    def cell(self, x: int, y: int) -> str:
        return self.cells[self.index(x, y)]

    def update(self, x: int, y: int, char: str) -> None:
        """Write ``char`` uppercased into cell (x, y).

        Any character is accepted; coordinates are expected to be clamped by
        the caller already.
        """
        self.cells[self.index(x, y)] = char.upper()

    def rows(self) -> List[List[str]]:
        return [self.cells[y * WIDTH:(y + 1) * WIDTH] for y in range(HEIGHT)]

    def render_plain(self, x: int, y: int) -> str:
        """Render without escape codes, the selected cell wrapped in brackets."""
        lines = []
        for row_y, row in enumerate(self.rows()):
            parts = []
            for col_x, char in enumerate(row):
                parts.append(f"[{char}]" if (col_x, row_y) == (x, y) else char)
            lines.append(" ".join(parts))
        return "\n".join(lines) + "\n"

    def to_text(self, x: int, y: int, highlight: Optional[Highlight] = None) -> Text:
        """Lay the board out as rich Text with the cell at (x, y) highlighted."""
        style = highlight_style(highlight or Highlight())
        text = Text()
        for row_y, row in enumerate(self.rows()):
            if row_y:
                text.append("\n")
            for col_x, char in enumerate(row):
                if col_x:
                    text.append(" ")
                text.append(char, style=style if (col_x, row_y) == (x, y) else "")
        return text

    def display(self, target: TextIO, x: int, y: int, highlight: Optional[Highlight] = None) -> None:
        """Redraw the board on ``target`` starting at the top-left corner.

        The region below the origin is cleared first so every call fully
        replaces the previous frame. Write errors propagate to the caller.
        """
        # same colour depth as Textual
        console = Console(file=target, force_terminal=True, color_system="truecolor", soft_wrap=True)
        console.control(Control.move_to(0, 0))
        target.write(CLEAR_FROM_CURSOR_DOWN)
        console.print(self.to_text(x, y, highlight))

        target.flush()
        logger.debug("Displayed board with cursor at (%d, %d)", x, y)
