"""
Domain entities and value objects.
"""
from .enums import (
    Browser,
    DataKind,
    Framework,
    ImportTarget,
    Language,
    Library,
    NetworkProfile,
    Severity,
    Stage,
    TemplateCategory,
    TestRunner,
    Viewport,
)
from .errors import (
    CorpusError,
    InvalidStageError,
    PromptWizardError,
    UnknownFrameworkError,
    UnknownOptionError,
)
from .configuration import (
    IdGenerator,
    Selector,
    SequenceEditor,
    TestConfiguration,
    TestStep,
)
from .scenario import DemoScenario, ScenarioTemplate
