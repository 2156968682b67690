"""
Player class representing a game participant.
"""

import random
import string
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_player_id(rng: Optional[random.Random] = None) -> str:
    """
    Generate a unique player identifier.

    Format: ``player_<epoch millis>_<9 base36 chars>``.
    """
    source = rng or random
    suffix = "".join(source.choice(_ID_ALPHABET) for _ in range(9))
    return f"player_{int(time.time() * 1000)}_{suffix}"


@dataclass
class Player:
    """Represents a player in the game."""
    id: str
    name: str
    is_active: bool = True
    is_spy: bool = False

    def __str__(self) -> str:
        role = "spy" if self.is_spy else "civilian"
        return f"{self.name} ({role})"

    @property
    def is_civilian(self) -> bool:
        """Check if player is a civilian."""
        return not self.is_spy

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "is_active": self.is_active,
            "is_spy": self.is_spy,
        }
