"""
Random Test-Data Generator

Produces synthetic names, emails, phone numbers, addresses and dates from the
corpus word lists. This is the only part of the wizard that consumes
randomness; a ``random.Random`` and a date source can be injected for
reproducible output.
"""
import random
from datetime import date, timedelta
from typing import Callable, Optional, Union

from prompt_wizard.domain import DataKind, UnknownOptionError
from prompt_wizard.services.corpus import CorpusStore


MAX_DATE_OFFSET_DAYS = 364


class RandomDataGenerator:
    """Generates one synthetic value per call."""

    def __init__(
        self,
        corpus: CorpusStore,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today
    ):
        self._corpus = corpus
        self._rng = rng or random.Random()
        self._today = today

    def generate(self, kind: Union[DataKind, str]) -> str:
        """Generate a value of the requested kind.

        Unrecognized kinds yield an empty string instead of raising.
        """
        try:
            kind = DataKind.from_value(kind)
        except UnknownOptionError:
            return ""

        if kind is DataKind.NAME:
            return f"{self._pick('first_names')} {self._pick('last_names')}"
        if kind is DataKind.EMAIL:
            first = self._pick('first_names').lower()
            last = self._pick('last_names').lower()
            return f"{first}.{last}@{self._pick('email_domains')}"
        if kind is DataKind.PHONE:
            area = self._rng.randint(100, 999)
            exchange = self._rng.randint(100, 999)
            line = self._rng.randint(1000, 9999)
            return f"+1 ({area}) {exchange}-{line}"
        if kind is DataKind.ADDRESS:
            number = self._rng.randint(100, 9999)
            return f"{number} {self._pick('streets')}, {self._pick('cities')}, USA"
        if kind is DataKind.DATE:
            offset = self._rng.randint(0, MAX_DATE_OFFSET_DAYS)
            return (self._today() + timedelta(days=offset)).isoformat()
        return ""

    def _pick(self, word_list: str) -> str:
        return self._rng.choice(self._corpus.word_list(word_list))


def append_record(buffer: str, record: str) -> str:
    """Append a record to a newline-delimited buffer without overwriting it."""
    if not record:
        return buffer
    return f"{buffer}\n{record}" if buffer else record
