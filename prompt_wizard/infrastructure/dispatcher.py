"""
Effect dispatcher - hands effect requests to the collaborator sinks.
"""
from typing import Iterable

from prompt_wizard.interfaces import (
    Effect,
    IClipboardSink,
    INotificationSink,
    Notify,
    WriteClipboard,
)


class EffectDispatcher:
    """Performs the side effects requested by wizard operations."""

    def __init__(self, notifications: INotificationSink, clipboard: IClipboardSink):
        self._notifications = notifications
        self._clipboard = clipboard

    def dispatch(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, Notify):
                self._notifications.notify(effect.title, effect.body, effect.severity)
            elif isinstance(effect, WriteClipboard):
                self._clipboard.write_text(effect.text)
            else:
                raise TypeError(f"Unknown effect {effect!r}")
