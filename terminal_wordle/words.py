import logging
import random
from typing import Dict, List

logger = logging.getLogger(__name__)


class WordListError(ValueError):
    """The word list is unusable for the requested game."""


def load_words(path) -> Dict[int, List[str]]:
    """Load an alphabetic word list (UTF-8, one per line), grouped by length."""
    by_length: Dict[int, List[str]] = {}
    with open(path, encoding="utf-8-sig") as f:
        try:
            for lineno, line in enumerate(f, 1):
                w = line.strip()
                if not w:
                    continue
                if not (w.isascii() and w.isalpha()):
                    raise WordListError(f"File {path}, line {lineno}: {w!r} is not alphabetic.")
                by_length.setdefault(len(w), []).append(w.upper())
        except UnicodeDecodeError as e:
            raise WordListError(f"File {path} is not valid UTF-8.") from e
    logger.info("Loaded %d words from %s", sum(map(len, by_length.values())), path)
    return by_length


def choose_random_word(words_by_length: Dict[int, List[str]], length: int, rng=random) -> str:
    words = words_by_length.get(length)
    if not words:
        raise WordListError(f"No word of length {length} found.")
    return rng.choice(words)
