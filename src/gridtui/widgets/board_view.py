"""Board widget: draws the grid and turns key presses into edits."""

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from gridlib.config import Highlight

from ..key_parser import KeyParser
from ..models.editor_state import EditorState

logger = logging.getLogger(__name__)


class BoardView(Widget, can_focus=True):
    """Widget showing the board with the selected cell highlighted."""

    DEFAULT_CSS = """
    BoardView {
        width: auto;
        height: auto;
    }
    """

    class ExitRequested(Message):
        """Message sent when the quit key moves the editor to Exiting."""
        pass

    def __init__(
        self,
        editor: EditorState,
        parser: Optional[KeyParser] = None,
        highlight: Optional[Highlight] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.editor = editor
        self.parser = parser or KeyParser()
        self.highlight = highlight or Highlight()

    def on_mount(self) -> None:
        # The first frame is drawn by the mount itself
        self.editor.take_changed()

    def render(self) -> Text:
        x, y = self.editor.cursor.as_tuple()
        return self.editor.board.to_text(x, y, self.highlight)

    def on_key(self, event: events.Key) -> None:
        """Handle key events."""
        character = event.character if event.is_printable else None
        parsed = self.parser.parse(event.key, character)
        logger.debug("Key %r parsed as %s", event.key, parsed.action.name)

        self.editor.apply(parsed)
        event.stop()
        event.prevent_default()

        if not self.editor.running:
            self.post_message(self.ExitRequested())
            return

        if self.editor.take_changed():
            self.refresh()
