"""
Concrete adapters for the wizard's external collaborators.
"""
from .clipboard import MemoryClipboard
from .dispatcher import EffectDispatcher
from .file_reader import AsyncFileReader
from .notifications import (
    LoggingNotificationSink,
    RecordedNotification,
    RecordingNotificationSink,
)

__all__ = [
    'MemoryClipboard',
    'EffectDispatcher',
    'AsyncFileReader',
    'LoggingNotificationSink',
    'RecordedNotification',
    'RecordingNotificationSink',
]
