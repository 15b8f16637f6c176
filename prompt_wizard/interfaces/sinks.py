"""
External collaborator interfaces.

The wizard never performs side effects itself; it asks for them through these
sinks. Both calls are fire-and-forget: results are never inspected.
"""
from abc import ABC, abstractmethod

from prompt_wizard.domain import Severity


class INotificationSink(ABC):
    """Interface for user-visible notifications (toasts)."""

    @abstractmethod
    def notify(self, title: str, body: str, severity: Severity = Severity.INFO) -> None:
        """Show a notification.

        Args:
            title: Short headline
            body: Human-readable detail
            severity: INFO for confirmations, DESTRUCTIVE for errors
        """
        pass


class IClipboardSink(ABC):
    """Interface for writing text to the system clipboard."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Write text to the clipboard.

        Args:
            text: Text to place on the clipboard
        """
        pass
