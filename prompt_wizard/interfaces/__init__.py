"""
Interfaces for the wizard's external collaborators.

The core depends on these abstractions; concrete sinks live in
prompt_wizard.infrastructure.
"""
from .sinks import INotificationSink, IClipboardSink
from .effects import Effect, Effects, Notify, WriteClipboard

__all__ = [
    'INotificationSink',
    'IClipboardSink',
    'Effect',
    'Effects',
    'Notify',
    'WriteClipboard',
]
