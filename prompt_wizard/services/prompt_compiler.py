"""
Prompt Compiler

Turns a TestConfiguration into the Markdown prompt handed to an LLM for test
code generation. Compilation is a pure function of the configuration: no
caching, no hidden state, identical output for identical input.

Section order:
    title, Project Context, Environment & Browser Configuration,
    Test Scenario (steps), Element Selectors Reference (optional),
    Test Data (optional), Requirements
"""
from typing import Optional

from prompt_wizard.domain import (
    Framework,
    ScenarioTemplate,
    TestConfiguration,
)


NOT_AVAILABLE = "N/A"
DEFAULT_TEST_NAME = "Automated Test"

POM_ENABLED = "Yes, please follow POM pattern"
POM_DISABLED = "No, keep it simple"
BDD_ENABLED = "Yes, generate a Gherkin .feature file and step definitions"
BDD_DISABLED = "No"

SELECTOR_TABLE_HEADER = (
    "| Element Name | Selector |",
    "|--------------|----------|",
)

BASE_REQUIREMENTS = (
    "Use reliable selectors (prioritize ID, Name, Data-Test-ID, then CSS/XPath).",
    "Include necessary imports and setup.",
)
CLEAN_CODE_REQUIREMENT = "Provide clean, well-commented code."

# Requirement 3, by framework family
JAVA_REQUIREMENT = "Ensure thread-safety and proper teardown."
CYPRESS_REQUIREMENT = "Use Cypress best practices and custom commands if needed."
CSHARP_REQUIREMENT = "Follow C# coding conventions and use NUnit or xUnit assertions."
DEFAULT_REQUIREMENT = "Use async/await where applicable."

# Requirement 5, only for auto-waiting libraries
PLAYWRIGHT_WAITING_REQUIREMENT = "Utilize built-in auto-waiting features."
CYPRESS_WAITING_REQUIREMENT = "Utilize Cypress's built-in assertions and auto-retry logic."


def family_requirement(framework: Framework) -> str:
    """Requirement 3: a framework-family specific directive."""
    if framework.is_java_family:
        return JAVA_REQUIREMENT
    if "Cypress" in framework.value:
        return CYPRESS_REQUIREMENT
    if "C#" in framework.value:
        return CSHARP_REQUIREMENT
    return DEFAULT_REQUIREMENT


def waiting_requirement(framework: Framework) -> Optional[str]:
    """Requirement 5, or None when the library has no built-in waiting."""
    if "Cypress" in framework.value:
        return CYPRESS_WAITING_REQUIREMENT
    if "Playwright" in framework.value:
        return PLAYWRIGHT_WAITING_REQUIREMENT
    return None


class PromptCompiler:
    """Compiles a configuration into a Markdown prompt."""

    def compile(self, config: TestConfiguration) -> str:
        sections = [
            self._build_title(config),
            self._build_project_context(config),
            self._build_environment(config),
            self._build_scenario(config),
            self._build_selectors(config),
            self._build_test_data(config),
            self._build_requirements(config),
        ]
        return "\n\n".join(s for s in sections if s) + "\n"

    @staticmethod
    def _build_title(config: TestConfiguration) -> str:
        return f"Generate a precise automated web UI test using {config.framework.value}."

    @staticmethod
    def _build_project_context(config: TestConfiguration) -> str:
        lines = [
            "## Project Context",
            f"- **Base URL**: {config.url or NOT_AVAILABLE}",
            f"- **Test Name**: {config.test_name or DEFAULT_TEST_NAME}",
            f"- **Page Object Model**: {POM_ENABLED if config.use_page_objects else POM_DISABLED}",
            f"- **BDD/Gherkin Support**: {BDD_ENABLED if config.is_bdd else BDD_DISABLED}",
        ]
        if config.framework.is_java_family:
            lines.append(f"- **Test Runner**: {config.test_runner.value}")
        lines.append(f"- **Coding Standards**: {config.coding_standards}")
        return "\n".join(lines)

    @staticmethod
    def _build_environment(config: TestConfiguration) -> str:
        return "\n".join([
            "## Environment & Browser Configuration",
            f"- **Browser**: {config.browser.value}",
            f"- **Viewport**: {config.viewport.value}",
            f"- **Network Profile**: {config.network.value}",
        ])

    @staticmethod
    def _build_scenario(config: TestConfiguration) -> str:
        lines = ["## Test Scenario"]
        if config.description:
            lines.append(f"**Description**: {config.description}")
        lines.append("")
        lines.append("### Steps to Automate:")
        for index, step in enumerate(config.steps, start=1):
            line = f"{index}. {step.action}"
            if step.expected:
                line += f" (Assertion: {step.expected})"
            lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def _build_selectors(config: TestConfiguration) -> str:
        if not config.selectors:
            return ""
        lines = ["### Element Selectors Reference:", *SELECTOR_TABLE_HEADER]
        for selector in config.selectors:
            lines.append(f"| {selector.name or NOT_AVAILABLE} | {selector.selector or NOT_AVAILABLE} |")
        return "\n".join(lines)

    @staticmethod
    def _build_test_data(config: TestConfiguration) -> str:
        if not config.test_data:
            return ""
        return "\n".join(["### Test Data:", "```", config.test_data, "```"])

    @staticmethod
    def _build_requirements(config: TestConfiguration) -> str:
        items = list(BASE_REQUIREMENTS)
        items.append(family_requirement(config.framework))
        items.append(CLEAN_CODE_REQUIREMENT)
        waiting = waiting_requirement(config.framework)
        if waiting:
            items.append(waiting)
        lines = ["## Requirements:"]
        lines.extend(f"{n}. {item}" for n, item in enumerate(items, start=1))
        return "\n".join(lines)


def compile_prompt(config: TestConfiguration) -> str:
    """Compile a configuration into the LLM prompt."""
    return PromptCompiler().compile(config)


def format_template_steps(template: ScenarioTemplate) -> str:
    """Render a catalog template as a pasteable numbered step list."""
    steps = "\n".join(f"{i}. {step}" for i, step in enumerate(template.steps, start=1))
    return f"Scenario: {template.title}\nSteps:\n{steps}"
