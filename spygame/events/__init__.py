"""
Match event recording.
"""

from .event_emitter import EventEmitter
from .run_recorder import RunRecorder

__all__ = ['EventEmitter', 'RunRecorder']
