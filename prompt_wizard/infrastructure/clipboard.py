"""
Clipboard sinks.
"""
from typing import List, Optional

from prompt_wizard.interfaces import IClipboardSink


class MemoryClipboard(IClipboardSink):
    """In-process clipboard; keeps a history of writes."""

    def __init__(self):
        self.history: List[str] = []

    def write_text(self, text: str) -> None:
        self.history.append(text)

    @property
    def text(self) -> Optional[str]:
        """Most recently written text, or None."""
        return self.history[-1] if self.history else None
