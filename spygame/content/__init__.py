"""
Word content: categories, secret words, spy hints, and discussion prompts.
"""

from .categories import WordCategory, get_category_display_name, parse_categories
from .words import (
    SpyHints,
    generate_spy_hints,
    get_word_category,
    load_words,
    select_random_word,
)
from .hints import HintQuestions, load_hint_questions

__all__ = [
    'WordCategory',
    'get_category_display_name',
    'parse_categories',
    'SpyHints',
    'generate_spy_hints',
    'get_word_category',
    'load_words',
    'select_random_word',
    'HintQuestions',
    'load_hint_questions',
]
