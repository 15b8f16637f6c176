"""
Corpus Store - static reference data for the wizard.

Loads the synthetic-data word lists, the per-framework demo scenarios and
the scenario template catalog from a YAML document, once, and serves them
as immutable domain objects.
"""
from typing import Any, Dict, List, Optional, Tuple

import yaml

from prompt_wizard.config import EnvironmentConfig

from prompt_wizard.domain import (
    CorpusError,
    DemoScenario,
    Framework,
    ScenarioTemplate,
    Selector,
    TemplateCategory,
    TestStep,
)


REQUIRED_WORD_LISTS = ('first_names', 'last_names', 'email_domains', 'streets', 'cities')


class CorpusStore:
    """Read-only access to demo scenarios, templates and word lists."""

    def __init__(
        self,
        demos: Dict[Framework, DemoScenario],
        templates: List[ScenarioTemplate],
        word_lists: Dict[str, Tuple[str, ...]]
    ):
        missing = [f.value for f in Framework if f not in demos]
        if missing:
            raise CorpusError(f"Corpus has no demo scenario for: {', '.join(missing)}")
        for name in REQUIRED_WORD_LISTS:
            if not word_lists.get(name):
                raise CorpusError(f"Corpus word list {name!r} is missing or empty")

        self._demos = dict(demos)
        self._templates = list(templates)
        self._word_lists = dict(word_lists)

    @classmethod
    def load_from_yaml(cls, yaml_path: str) -> 'CorpusStore':
        """Load the corpus from a YAML file."""
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise CorpusError(f"Could not read corpus {yaml_path}: {e}") from e
        except yaml.YAMLError as e:
            raise CorpusError(f"Corpus {yaml_path} is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise CorpusError(f"Corpus {yaml_path} must be a mapping at the top level")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CorpusStore':
        """Create a CorpusStore from a parsed corpus dictionary."""
        try:
            demos = {}
            for key, demo_data in (data.get('demos') or {}).items():
                framework = Framework.from_value(key)
                demos[framework] = DemoScenario(
                    framework=framework,
                    url=demo_data.get('url', ''),
                    test_name=demo_data.get('test_name', ''),
                    description=demo_data.get('description', ''),
                    steps=tuple(
                        TestStep(id=str(s['id']), action=s.get('action', ''), expected=s.get('expected', ''))
                        for s in demo_data.get('steps', [])
                    ),
                    selectors=tuple(
                        Selector(id=str(s['id']), name=s.get('name', ''), selector=s.get('selector', ''))
                        for s in demo_data.get('selectors', [])
                    ),
                    coding_standards=demo_data.get('coding_standards', ''),
                )

            templates = [
                ScenarioTemplate(
                    id=t['id'],
                    title=t['title'],
                    description=t.get('description', ''),
                    category=TemplateCategory.from_value(t.get('category', 'Navigation')),
                    steps=tuple(t.get('steps', [])),
                    selectors={str(k): str(v) for k, v in (t.get('selectors') or {}).items()},
                )
                for t in data.get('templates') or []
            ]

            word_lists = {
                name: tuple(str(word) for word in words)
                for name, words in (data.get('word_lists') or {}).items()
            }
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise CorpusError(f"Malformed corpus entry: {e}") from e

        return cls(demos=demos, templates=templates, word_lists=word_lists)

    def get_demo(self, framework: Framework) -> DemoScenario:
        return self._demos[Framework.from_value(framework)]

    def list_templates(self) -> List[ScenarioTemplate]:
        return list(self._templates)

    def get_template(self, template_id: str) -> Optional[ScenarioTemplate]:
        for template in self._templates:
            if template.id == template_id:
                return template
        return None

    def word_list(self, name: str) -> Tuple[str, ...]:
        return self._word_lists[name]


_corpus: Optional[CorpusStore] = None


def get_corpus(path: Optional[str] = None) -> CorpusStore:
    """Get the process-wide corpus, loading it on first use.

    Args:
        path: Explicit YAML path. Bypasses the cached store when given.
    """
    global _corpus
    if path is not None:
        return CorpusStore.load_from_yaml(path)
    if _corpus is None:
        _corpus = CorpusStore.load_from_yaml(str(EnvironmentConfig.get_corpus_path()))
    return _corpus
