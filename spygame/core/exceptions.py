"""
Exceptions for invalid game input.
"""


class SpyGameError(Exception):
    """Base class for spy game errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(self.message)


class SetupValidationError(SpyGameError):
    """Raised when player names or spy count cannot start a match."""

    def __init__(self, message: str, valid_player_count: int = 0, spy_count: int = 0):
        self.valid_player_count = valid_player_count
        self.spy_count = spy_count
        super().__init__(message)


class EmptyCategorySelectionError(SpyGameError):
    """Raised when a word is requested without any category selected."""

    def __init__(self, message: str = "No word category selected"):
        super().__init__(message)


class EmptyWordPoolError(SpyGameError):
    """Raised when every selected category resolves to no words."""

    def __init__(self, categories=None, message: str = ""):
        self.categories = list(categories or [])
        names = ", ".join(str(getattr(c, "value", c)) for c in self.categories)
        super().__init__(message or f"Word list is empty for selected categories: {names}")
