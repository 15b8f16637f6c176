"""Shared fixtures for prompt wizard tests."""
import random

import pytest

from prompt_wizard.domain import Framework
from prompt_wizard.infrastructure import EffectDispatcher, MemoryClipboard, RecordingNotificationSink
from prompt_wizard.services import RandomDataGenerator, StructuredLogger, WizardController, get_corpus


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def corpus():
    return get_corpus()


@pytest.fixture
def quiet_logger():
    return StructuredLogger(name="prompt_wizard.tests", enable_console=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(corpus, quiet_logger, clock):
    return WizardController(
        corpus,
        generator=RandomDataGenerator(corpus, rng=random.Random(7)),
        default_framework=Framework.PLAYWRIGHT_PYTHON,
        copy_feedback_seconds=2.0,
        clock=clock,
        logger=quiet_logger
    )


@pytest.fixture
def notifications():
    return RecordingNotificationSink()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def dispatcher(notifications, clipboard):
    return EffectDispatcher(notifications, clipboard)
