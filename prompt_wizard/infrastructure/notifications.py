"""
Notification sinks.
"""
from dataclasses import dataclass
from typing import List, Optional

from prompt_wizard.domain import Severity
from prompt_wizard.interfaces import INotificationSink
from prompt_wizard.services.telemetry import StructuredLogger, get_logger


class LoggingNotificationSink(INotificationSink):
    """Sends notifications to the structured log."""

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._logger = logger or get_logger()

    def notify(self, title: str, body: str, severity: Severity = Severity.INFO) -> None:
        self._logger.log_notification(title, body, Severity.from_value(severity).value)


@dataclass(frozen=True)
class RecordedNotification:
    title: str
    body: str
    severity: Severity


class RecordingNotificationSink(INotificationSink):
    """Keeps every notification in memory, in arrival order."""

    def __init__(self):
        self.notifications: List[RecordedNotification] = []

    def notify(self, title: str, body: str, severity: Severity = Severity.INFO) -> None:
        self.notifications.append(RecordedNotification(title, body, Severity.from_value(severity)))

    def titles(self) -> List[str]:
        return [n.title for n in self.notifications]
