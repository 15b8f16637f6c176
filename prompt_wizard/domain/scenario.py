"""
Read-only reference scenarios: per-framework demos and the template catalog.
"""
from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

from .configuration import Selector, TestStep
from .enums import Framework, TemplateCategory


@dataclass(frozen=True)
class DemoScenario:
    """A finished example that pre-fills the wizard for one framework."""
    framework: Framework
    url: str
    test_name: str
    description: str
    steps: Tuple[TestStep, ...]
    selectors: Tuple[Selector, ...]
    coding_standards: str

    def copy_steps(self) -> List[TestStep]:
        return [replace(step) for step in self.steps]

    def copy_selectors(self) -> List[Selector]:
        return [replace(selector) for selector in self.selectors]


@dataclass(frozen=True)
class ScenarioTemplate:
    """A common automation scenario users can copy steps from."""
    id: str
    title: str
    description: str
    category: TemplateCategory
    steps: Tuple[str, ...]
    selectors: Dict[str, str] = field(default_factory=dict, hash=False)
