"""
Stage handlers: role reveal, voting, and the match countdown.
"""

from .voting import VotingTally, VoteOutcome, TallyStage
from .role_reveal import RoleRevealHandler, RoleCard
from .timer import Countdown, format_time, get_time_color
from .haptics import HapticFeedback, VibrationStyle, terminal_bell

__all__ = [
    'VotingTally',
    'VoteOutcome',
    'TallyStage',
    'RoleRevealHandler',
    'RoleCard',
    'Countdown',
    'format_time',
    'get_time_color',
    'HapticFeedback',
    'VibrationStyle',
    'terminal_bell',
]
