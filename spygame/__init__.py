"""
Spy: a pass-the-device party word game.
"""

__version__ = "0.1.0"
