"""
Secret word selection and spy hints.
"""

import random
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TYPE_CHECKING

import yaml

from .categories import WordCategory, get_category_display_name
from ..core.exceptions import EmptyCategorySelectionError, EmptyWordPoolError

if TYPE_CHECKING:
    from ..core.game_engine import GameSettings

DATA_DIR = Path(__file__).parent / "data"
WORDS_FILE = DATA_DIR / "words.yaml"

WordsData = Dict[str, List[str]]


@lru_cache(maxsize=None)
def _load_words_file(path: str) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return tuple((str(category), tuple(words or [])) for category, words in data.items())


def load_words(path: Optional[str] = None) -> WordsData:
    """
    Load the word lists keyed by category name.

    Args:
        path: Optional YAML file; defaults to the bundled word list

    Returns:
        Mapping of category name to words
    """
    entries = _load_words_file(str(path or WORDS_FILE))
    return {category: list(words) for category, words in entries}


def get_word_category(word: str, words: Optional[WordsData] = None) -> Optional[WordCategory]:
    """Find which category a word belongs to, or None."""
    data = words if words is not None else load_words()
    for category, category_words in data.items():
        if word in category_words:
            return WordCategory(category)
    return None


def select_random_word(categories: Sequence[WordCategory],
                       words: Optional[WordsData] = None,
                       pick: Callable[[list], Tuple[str, WordCategory]] = random.choice
                       ) -> Tuple[str, WordCategory]:
    """
    Pick one word uniformly from the union of the selected categories.

    Args:
        categories: Selected categories
        words: Word lists keyed by category name; defaults to the bundled list
        pick: Chooses one element of a list (``random.Random(seed).choice``)

    Returns:
        (word, category) pair

    Raises:
        EmptyCategorySelectionError: If no category is selected
        EmptyWordPoolError: If the selected categories contain no words
    """
    if not categories:
        raise EmptyCategorySelectionError()

    data = words if words is not None else load_words()

    pool: List[Tuple[str, WordCategory]] = []
    for category in categories:
        category = WordCategory(category)
        for word in data.get(category.value) or []:
            pool.append((word, category))

    if not pool:
        raise EmptyWordPoolError(categories)

    return pick(pool)


@dataclass
class SpyHints:
    """Hints shown to spies, depending on match settings."""
    category: Optional[str] = None
    letter_count: Optional[int] = None
    first_letter: Optional[str] = None

    def as_lines(self) -> List[str]:
        lines = []
        if self.category:
            lines.append(f"Category: {self.category}")
        if self.letter_count is not None:
            lines.append(f"Letter count: {self.letter_count}")
        if self.first_letter:
            lines.append(f"First letter: {self.first_letter}")
        return lines


def generate_spy_hints(word: str, category: WordCategory, settings: 'GameSettings') -> SpyHints:
    """Build the spy hints enabled by the match settings."""
    hints = SpyHints()

    if settings.show_category_to_spy:
        hints.category = get_category_display_name(category)

    if settings.show_letter_count_to_spy:
        hints.letter_count = len(word)

    if settings.show_first_letter_to_spy:
        hints.first_letter = word[0].upper()

    return hints
