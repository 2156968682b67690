"""
Best-effort haptic feedback.
"""

import sys
from enum import Enum
from typing import Callable, Optional


class VibrationStyle(Enum):
    """Vibration intensity."""
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    RIGID = "rigid"
    SOFT = "soft"


Backend = Callable[[VibrationStyle], None]


def terminal_bell(style: VibrationStyle) -> None:
    """Ring the terminal bell as a stand-in for vibration."""
    sys.stdout.write("\a")
    sys.stdout.flush()


class HapticFeedback:
    """
    Forwards vibration requests to a device backend.

    Without a backend every request is a no-op. Backend failures are
    reported and never raised.
    """

    def __init__(self, backend: Optional[Backend] = None):
        self.backend = backend

    @property
    def available(self) -> bool:
        return self.backend is not None

    def vibrate(self, style: VibrationStyle = VibrationStyle.MEDIUM) -> None:
        if not self.available:
            return
        try:
            self.backend(style)
        except Exception as e:
            print(f"Warning: vibration failed: {e}")

    def vibrate_light(self) -> None:
        self.vibrate(VibrationStyle.LIGHT)

    def vibrate_medium(self) -> None:
        self.vibrate(VibrationStyle.MEDIUM)

    def vibrate_heavy(self) -> None:
        self.vibrate(VibrationStyle.HEAVY)
