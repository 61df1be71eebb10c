"""Editor state: board, cursor, dirty flag and run state."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from gridlib.board import Board

from ..key_parser import KeyAction, KeyParser, ParsedKey
from .cursor import Cursor

logger = logging.getLogger(__name__)


class RunState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


@dataclass
class EditorState:
    """Everything the event loop mutates, kept free of terminal concerns."""

    board: Board = field(default_factory=Board)
    cursor: Cursor = field(default_factory=Cursor)
    changed: bool = True    # first frame must be drawn
    state: RunState = RunState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    def take_changed(self) -> bool:
        """Return the dirty flag and clear it."""
        changed = self.changed
        self.changed = False
        return changed

    def apply(self, parsed: ParsedKey) -> None:
        """Apply one parsed key press."""
        if not self.running:
            return

        action = parsed.action
        if action is KeyAction.MOVE_LEFT:
            self.cursor.move_left()
        elif action is KeyAction.MOVE_RIGHT:
            self.cursor.move_right()
        elif action is KeyAction.MOVE_UP:
            self.cursor.move_up()
        elif action is KeyAction.MOVE_DOWN:
            self.cursor.move_down()
        elif action is KeyAction.WRITE:
            self.board.update(self.cursor.x, self.cursor.y, parsed.character)
        elif action is KeyAction.QUIT:
            logger.info("Quit key pressed, exiting")
            self.state = RunState.EXITING
            return
        else:
            # Enter and unknown keys
            return

        self.changed = True

    def replay(self, names: Iterable[str], parser: KeyParser) -> None:
        """Apply a sequence of key names, as given on the command line."""
        for name in names:
            self.apply(parser.parse_name(name))
