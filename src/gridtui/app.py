"""Main TUI application for editing the board."""

import logging
from pathlib import Path
from typing import Optional, Set

from textual.app import App
from textual.containers import Vertical
from textual.widgets import Static

from gridlib.config import Config, load_config
from gridlib.dictionary import load_dictionary
from gridlib.errors import DictionaryError

from .key_parser import KeyParser
from .models.editor_state import EditorState
from .widgets.board_view import BoardView


logger = logging.getLogger(__name__)


class GridEditorApp(App):
    """Terminal editor for a 5x5 board of characters.

    Textual owns the terminal for the lifetime of ``run()``: the text cursor is
    hidden on entry and normal mode is restored on every exit path.
    """

    TITLE = "gridedit"

    CSS = """
    Screen {
        layout: vertical;
    }

    #help {
        margin-top: 1;
    }
    """

    def __init__(self, config: Optional[Config] = None, dictionary_path: Optional[Path] = None):
        super().__init__()
        self.config = config or load_config()
        self.dictionary_path = dictionary_path or self.config.dictionary_path
        self.dictionary: Optional[Set[str]] = None
        self.editor = EditorState()
        self.key_parser = KeyParser(quit_key=self.config.quit_key)

    def compose(self):
        """Compose the screen layout."""
        with Vertical():
            yield BoardView(
                self.editor,
                parser=self.key_parser,
                highlight=self.config.highlight,
                id="board",
            )
            yield Static(self.key_parser.get_help_text(), id="help")

    def on_mount(self) -> None:
        """Load the dictionary and focus the board."""
        self.dictionary = self.load_dictionary()
        self.query_one("#board", BoardView).focus()
        logger.info("TUI app initialized successfully")

    def load_dictionary(self) -> Optional[Set[str]]:
        """Load the word list; a failure is logged and otherwise ignored."""
        try:
            return load_dictionary(self.dictionary_path)
        except DictionaryError as e:
            logger.warning(f"Dictionary not loaded: {e}")
            return None

    def on_board_view_exit_requested(self, message: BoardView.ExitRequested) -> None:
        """Leave the application once the editor reaches Exiting."""
        logger.info("Exiting editor")
        self.exit()


def run_tui(config: Optional[Config] = None, dictionary_path: Optional[Path] = None) -> int:
    """Entry point for running the TUI; returns the process exit status."""
    config = config or load_config()

    # The terminal belongs to the renderer, so log to a file only
    log_file = config.log_file
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode='w')
        ],
        force=True,
    )

    logger.info(f"Starting TUI, debug log at: {log_file}")

    app = GridEditorApp(config=config, dictionary_path=dictionary_path)
    app.run()
    # Textual reports crashes itself and sets a non-zero return code
    return app.return_code or 0
