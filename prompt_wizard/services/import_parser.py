"""
Import Parser

Decodes uploaded file content for the wizard. Data uploads replace the test
data buffer verbatim. Selector uploads are decoded as JSON and accepted in
two shapes:

- an object ``{"name": "selector", ...}``: one selector per key, fresh ids;
- an array ``[{"id": ..., "name": ..., "selector": ...}, ...]``: one selector
  per element, keeping non-empty ids; a repeated id is kept only by its
  first element.

Malformed JSON and any other decoded shape leave the selectors untouched.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from prompt_wizard.domain import IdGenerator, Selector


class ImportOutcome(str, Enum):
    """What a selector import did."""
    REPLACED = "replaced"
    MALFORMED = "malformed"
    UNSUPPORTED_SHAPE = "unsupported_shape"


@dataclass
class SelectorImportResult:
    """Outcome of decoding a selector file."""
    outcome: ImportOutcome
    selectors: List[Selector] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def replaced(self) -> bool:
        return self.outcome is ImportOutcome.REPLACED


def _stringify(value: Any) -> str:
    """Render a decoded JSON value as selector text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _text_or_empty(value: Any) -> str:
    if value is None or value == "":
        return ""
    return _stringify(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_selectors(raw_text: str, ids: IdGenerator) -> SelectorImportResult:
    """Decode selector file content into a replacement selector list.

    Args:
        raw_text: File content as uploaded
        ids: Id source for entries that do not carry their own id

    Returns:
        SelectorImportResult; ``selectors`` is only meaningful when replaced
    """
    try:
        parsed = json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as e:
        return SelectorImportResult(outcome=ImportOutcome.MALFORMED, error=str(e))

    if isinstance(parsed, dict):
        selectors = []
        for name, value in parsed.items():
            entry_id = ids.next_id(s.id for s in selectors)
            selectors.append(Selector(id=entry_id, name=str(name), selector=_stringify(value)))
        return SelectorImportResult(outcome=ImportOutcome.REPLACED, selectors=selectors)

    if isinstance(parsed, list):
        elements = [item if isinstance(item, dict) else {} for item in parsed]
        kept_ids = {_text_or_empty(item.get('id')) for item in elements} - {""}
        selectors = []
        used = set()
        for item in elements:
            entry_id = _text_or_empty(item.get('id'))
            if not entry_id or entry_id in used:
                entry_id = ids.next_id(kept_ids | used)
            used.add(entry_id)
            selectors.append(Selector(
                id=entry_id,
                name=_text_or_empty(item.get('name')),
                selector=_text_or_empty(item.get('selector')),
            ))
        return SelectorImportResult(outcome=ImportOutcome.REPLACED, selectors=selectors)

    return SelectorImportResult(outcome=ImportOutcome.UNSUPPORTED_SHAPE)
