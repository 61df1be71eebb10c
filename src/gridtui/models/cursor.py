"""Cursor position management for the TUI."""

from dataclasses import dataclass

from gridlib.board import HEIGHT, WIDTH


@dataclass
class Cursor:
    """Track the selected cell; both coordinates stay within the board."""

    x: int = 0
    y: int = 0

    def move_left(self) -> None:
        self.x = max(self.x - 1, 0)

    def move_right(self) -> None:
        self.x = min(self.x + 1, WIDTH - 1)

    def move_up(self) -> None:
        self.y = max(self.y - 1, 0)

    def move_down(self) -> None:
        self.y = min(self.y + 1, HEIGHT - 1)

    def as_tuple(self) -> tuple:
        return (self.x, self.y)
