"""
Word categories.
"""

from enum import Enum


class WordCategory(Enum):
    """Categories the secret word can be drawn from."""
    ANIMALS = "animals"
    CITIES = "cities"
    PROFESSIONS = "professions"
    OBJECTS = "objects"
    FOOD = "food"
    DRINKS = "drinks"
    SMOKING = "smoking"
    ENTERTAINMENT = "entertainment"
    RELATIONSHIPS = "relationships"
    GAMES = "games"
    HOBBIES = "hobbies"
    HOLIDAYS = "holidays"
    SPORTS = "sports"


CATEGORY_DISPLAY_NAMES = {
    WordCategory.ANIMALS: "Animals",
    WordCategory.CITIES: "Cities",
    WordCategory.PROFESSIONS: "Professions",
    WordCategory.OBJECTS: "Objects",
    WordCategory.FOOD: "Food",
    WordCategory.DRINKS: "Drinks",
    WordCategory.SMOKING: "Smoking",
    WordCategory.ENTERTAINMENT: "Entertainment",
    WordCategory.RELATIONSHIPS: "Relationships",
    WordCategory.GAMES: "Games",
    WordCategory.HOBBIES: "Hobbies",
    WordCategory.HOLIDAYS: "Holidays",
    WordCategory.SPORTS: "Sports",
}


def get_category_display_name(category: WordCategory) -> str:
    """Get the human readable name of a category."""
    return CATEGORY_DISPLAY_NAMES[WordCategory(category)]


def parse_categories(values) -> list:
    """
    Convert category names (or enum members) to WordCategory members.

    Raises:
        ValueError: If a name is not a known category
    """
    return [WordCategory(value) for value in values]
