"""
Closed enumerations for the wizard configuration.

Every selectable option in the wizard is one of these members; free strings
coming from a host are coerced through ``from_value`` and rejected otherwise.
"""
from enum import Enum, IntEnum
from typing import Tuple

from .errors import UnknownFrameworkError, UnknownOptionError


class _LabelledEnum(str, Enum):
    """String enum whose value is the label shown and rendered verbatim."""

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value or member.name == value:
                return member
        raise UnknownOptionError(f"{value!r} is not a valid {cls.__name__}")

    def __str__(self) -> str:
        return self.value


class Language(str, Enum):
    """Programming language half of a framework."""
    JAVA = "Java"
    PYTHON = "Python"
    JAVASCRIPT = "JavaScript"
    CSHARP = "C#"


class Library(str, Enum):
    """Automation library half of a framework."""
    SELENIUM = "Selenium"
    SELENIDE = "Selenide"
    PLAYWRIGHT = "Playwright"
    CYPRESS = "Cypress"


class Framework(_LabelledEnum):
    """The nine supported library x language combinations."""
    SELENIUM_JAVA = "Selenium Java"
    SELENIDE_JAVA = "Selenide Java"
    SELENIUM_PYTHON = "Selenium Python"
    PLAYWRIGHT_PYTHON = "Playwright Python"
    PLAYWRIGHT_JAVA = "Playwright Java"
    PLAYWRIGHT_JAVASCRIPT = "Playwright JavaScript"
    SELENIUM_JAVASCRIPT = "Selenium JavaScript"
    SELENIUM_CSHARP = "Selenium C#"
    CYPRESS_JAVASCRIPT = "Cypress JavaScript"

    @classmethod
    def from_value(cls, value) -> 'Framework':
        try:
            return super().from_value(value)
        except UnknownOptionError:
            raise UnknownFrameworkError(f"{value!r} is not a supported framework") from None

    @property
    def library(self) -> Library:
        return Library(self.value.split(" ", 1)[0])

    @property
    def language(self) -> Language:
        return Language(self.value.split(" ", 1)[1])

    @property
    def is_java_family(self) -> bool:
        """True when the label contains "Java".

        The match is on the label text, so the JavaScript frameworks belong to
        the family too and get a test runner.
        """
        return "Java" in self.value


class Browser(_LabelledEnum):
    CHROMIUM = "Chromium"
    FIREFOX = "Firefox"
    WEBKIT = "WebKit"
    CROSS_BROWSER = "Cross-Browser"


class Viewport(_LabelledEnum):
    DESKTOP_HD = "Desktop (1280x720)"
    DESKTOP_FULL_HD = "Desktop (1920x1080)"
    IPHONE_13 = "iPhone 13 (Mobile)"
    IPAD_AIR = "iPad Air (Tablet)"
    RESPONSIVE = "Responsive (Custom)"


class NetworkProfile(_LabelledEnum):
    NO_THROTTLING = "No Throttling"
    FAST_3G = "Fast 3G"
    SLOW_3G = "Slow 3G"
    OFFLINE = "Offline"


class TestRunner(_LabelledEnum):
    __test__ = False

    JUNIT_5 = "JUnit 5"
    TESTNG = "TestNG"


class DataKind(_LabelledEnum):
    """Kinds of synthetic test data the generator can produce."""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    ADDRESS = "address"
    DATE = "date"


class ImportTarget(_LabelledEnum):
    """Where an uploaded file's content goes."""
    SELECTORS = "selectors"
    DATA = "data"


class Severity(_LabelledEnum):
    """Notification severity passed to the notification sink."""
    INFO = "info"
    DESTRUCTIVE = "destructive"


class TemplateCategory(_LabelledEnum):
    SECURITY = "Security"
    COMMERCE = "Commerce"
    FORMS = "Forms"
    NAVIGATION = "Navigation"


class Stage(IntEnum):
    """The six wizard screens, in order."""
    FRAMEWORK = 1
    DETAILS = 2
    ENVIRONMENT = 3
    STEPS = 4
    SELECTORS_AND_DATA = 5
    CONFIGURATION = 6

    @property
    def title(self) -> str:
        return _STAGE_TITLES[self][0]

    @property
    def description(self) -> str:
        return _STAGE_TITLES[self][1]

    def editable_fields(self, framework: Framework) -> Tuple[str, ...]:
        """Configuration fields this stage presents for editing."""
        fields = _STAGE_FIELDS[self]
        if self is Stage.CONFIGURATION and not framework.is_java_family:
            fields = tuple(f for f in fields if f != 'test_runner')
        return fields


_STAGE_TITLES = {
    Stage.FRAMEWORK: ("Select Framework", "Choose the technology stack for your automation test."),
    Stage.DETAILS: ("Test Details", "Provide the core information about the test case."),
    Stage.ENVIRONMENT: ("Environment & Browser", "Define where and how the test should be executed."),
    Stage.STEPS: ("Automation Steps", "List the specific actions and assertions to be performed."),
    Stage.SELECTORS_AND_DATA: ("Selectors & Data", "Upload or paste element selectors and test data."),
    Stage.CONFIGURATION: ("Configurations", "Fine-tune the output with coding standards and patterns."),
}

_STAGE_FIELDS = {
    Stage.FRAMEWORK: ('framework',),
    Stage.DETAILS: ('url', 'test_name', 'description'),
    Stage.ENVIRONMENT: ('browser', 'viewport', 'network'),
    Stage.STEPS: ('steps',),
    Stage.SELECTORS_AND_DATA: ('selectors', 'test_data'),
    Stage.CONFIGURATION: ('use_page_objects', 'is_bdd', 'test_runner', 'coding_standards'),
}
