"""
Test configuration aggregate.

``TestConfiguration`` is the single mutable aggregate for one wizard session.
The step and selector lists are edited through ``SequenceEditor`` so that ids
stay unique within their list and the step list never drops below one entry.
"""
import itertools
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Iterable, List, Optional

from .enums import Browser, Framework, NetworkProfile, TestRunner, Viewport


DEFAULT_FRAMEWORK = Framework.PLAYWRIGHT_PYTHON
DEFAULT_STEP_ACTION = "Navigate to the home page"
DEFAULT_SELECTOR_NAME = "loginBtn"
DEFAULT_SELECTOR_VALUE = "#login-button"
DEFAULT_CODING_STANDARDS = "Use descriptive variable names and clear assertions."


@dataclass
class TestStep:
    """One action to automate, with an optional assertion."""
    __test__ = False

    id: str
    action: str = ""
    expected: str = ""


@dataclass
class Selector:
    """A named element locator."""
    id: str
    name: str = ""
    selector: str = ""


class IdGenerator:
    """Monotonic id source; ids only need to be unique within one list."""

    def __init__(self, prefix: str = "", start: int = 1):
        self._prefix = prefix
        self._counter = itertools.count(start)

    def next_id(self, taken: Iterable[str] = ()) -> str:
        taken = set(taken)
        while True:
            candidate = f"{self._prefix}{next(self._counter)}"
            if candidate not in taken:
                return candidate


class SequenceEditor:
    """Add / update / remove entries of one id-keyed list on the aggregate.

    The editor is bound to the attribute name rather than the list object,
    because bulk operations (demo load, import, reset) swap the list wholesale.
    """

    def __init__(
        self,
        owner: 'TestConfiguration',
        attribute: str,
        factory: Callable[[str], Any],
        ids: IdGenerator,
        editable: Iterable[str],
        min_length: int = 0
    ):
        self._owner = owner
        self._attribute = attribute
        self._factory = factory
        self._ids = ids
        self._editable = frozenset(editable)
        self.min_length = min_length

    @property
    def entries(self) -> List[Any]:
        return getattr(self._owner, self._attribute)

    def new_id(self) -> str:
        return self._ids.next_id(entry.id for entry in self.entries)

    def add(self) -> Any:
        """Append an empty entry with a fresh id and return it."""
        entry = self._factory(self.new_id())
        self.entries.append(entry)
        return entry

    def update(self, entry_id: str, field_name: str, value: str) -> bool:
        """Replace one text field of the entry with ``entry_id``.

        Returns False (and changes nothing) when no entry has that id.
        """
        if field_name not in self._editable:
            raise ValueError(f"{self._attribute} entries have no editable field {field_name!r}")
        entries = self.entries
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                entries[index] = replace(entry, **{field_name: value})
                return True
        return False

    def remove(self, entry_id: str) -> bool:
        """Delete the entry with ``entry_id`` unless the list is at its floor."""
        entries = self.entries
        if len(entries) <= self.min_length:
            return False
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                del entries[index]
                return True
        return False


def default_steps() -> List[TestStep]:
    return [TestStep(id="1", action=DEFAULT_STEP_ACTION, expected="")]


def default_selectors() -> List[Selector]:
    return [Selector(id="1", name=DEFAULT_SELECTOR_NAME, selector=DEFAULT_SELECTOR_VALUE)]


@dataclass
class TestConfiguration:
    """Everything the prompt compiler reads, for one session."""
    __test__ = False

    framework: Framework = DEFAULT_FRAMEWORK
    url: str = ""
    test_name: str = ""
    description: str = ""
    steps: List[TestStep] = field(default_factory=default_steps)
    selectors: List[Selector] = field(default_factory=default_selectors)
    browser: Browser = Browser.CHROMIUM
    viewport: Viewport = Viewport.DESKTOP_HD
    network: NetworkProfile = NetworkProfile.NO_THROTTLING
    use_page_objects: bool = True
    is_bdd: bool = False
    test_runner: TestRunner = TestRunner.JUNIT_5
    coding_standards: str = DEFAULT_CODING_STANDARDS
    test_data: str = ""

    def __post_init__(self):
        self.framework = Framework.from_value(self.framework)
        self.browser = Browser.from_value(self.browser)
        self.viewport = Viewport.from_value(self.viewport)
        self.network = NetworkProfile.from_value(self.network)
        self.test_runner = TestRunner.from_value(self.test_runner)
        if not self.steps:
            raise ValueError("A test configuration must have at least one step")

        self.step_ids = IdGenerator(prefix="step-")
        self.selector_ids = IdGenerator(prefix="sel-")
        self.step_editor = SequenceEditor(
            self, 'steps', lambda entry_id: TestStep(id=entry_id),
            self.step_ids, editable=('action', 'expected'), min_length=1
        )
        self.selector_editor = SequenceEditor(
            self, 'selectors', lambda entry_id: Selector(id=entry_id),
            self.selector_ids, editable=('name', 'selector')
        )

    def reset(self, framework: Optional[Framework] = None) -> None:
        """Restore every field to its default value in place."""
        defaults = TestConfiguration(framework=framework or DEFAULT_FRAMEWORK)
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'framework': self.framework.value,
            'url': self.url,
            'test_name': self.test_name,
            'description': self.description,
            'steps': [{'id': s.id, 'action': s.action, 'expected': s.expected} for s in self.steps],
            'selectors': [{'id': s.id, 'name': s.name, 'selector': s.selector} for s in self.selectors],
            'browser': self.browser.value,
            'viewport': self.viewport.value,
            'network': self.network.value,
            'use_page_objects': self.use_page_objects,
            'is_bdd': self.is_bdd,
            'test_runner': self.test_runner.value,
            'coding_standards': self.coding_standards,
            'test_data': self.test_data,
        }
