from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set

from .config import default_dictionary_path
from .errors import DictionaryError

logger = logging.getLogger(__name__)


def load_dictionary(path: Optional[Path] = None) -> Set[str]:
    """Read a newline-delimited word list into a set.

    Line terminators are stripped and blank lines skipped; duplicates collapse.
    Raises DictionaryError if the file cannot be opened or decoded, never
    returning a partial set.
    """
    dict_path = path or default_dictionary_path()
    words: Set[str] = set()
    try:
        with open(dict_path, "r", encoding="utf-8") as fh:
            for line in fh:
                word = line.rstrip("\r\n")
                if word:
                    words.add(word)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryError(f"cannot load dictionary {dict_path}: {e}") from e

    logger.info("Loaded %d words from %s", len(words), dict_path)
    return words
