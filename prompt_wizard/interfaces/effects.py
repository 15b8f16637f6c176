"""
Side-effect requests returned by wizard operations.

Operations mutate the configuration and return the effects they want
performed; a dispatcher at the boundary hands them to the sinks.
"""
from dataclasses import dataclass
from typing import List, Union

from prompt_wizard.domain import Severity


@dataclass(frozen=True)
class Notify:
    """Request a user-visible notification."""
    title: str
    body: str
    severity: Severity = Severity.INFO


@dataclass(frozen=True)
class WriteClipboard:
    """Request a clipboard write."""
    text: str


Effect = Union[Notify, WriteClipboard]
Effects = List[Effect]
