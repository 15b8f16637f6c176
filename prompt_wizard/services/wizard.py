"""
Wizard Stage Controller

Owns the TestConfiguration for one session and the current stage (1..6).
Every operation mutates the configuration synchronously and returns the
side effects it wants performed (notifications, clipboard writes); the
caller dispatches them.
"""
import time
from typing import Any, Callable, Optional, Tuple, Union

from prompt_wizard.domain import (
    Browser,
    DataKind,
    Framework,
    ImportTarget,
    InvalidStageError,
    NetworkProfile,
    Severity,
    Stage,
    TestConfiguration,
    TestRunner,
    TestStep,
    UnknownFrameworkError,
    Viewport,
)
from prompt_wizard.config import EnvironmentConfig
from prompt_wizard.domain.configuration import DEFAULT_FRAMEWORK
from prompt_wizard.interfaces import Effects, Notify, WriteClipboard
from prompt_wizard.services.corpus import CorpusStore
from prompt_wizard.services.data_generator import RandomDataGenerator, append_record
from prompt_wizard.services.import_parser import ImportOutcome, parse_selectors
from prompt_wizard.services.prompt_compiler import PromptCompiler, format_template_steps
from prompt_wizard.services.telemetry import StructuredLogger, get_logger


TRUE_WORDS = frozenset(("1", "true", "yes", "on"))
FALSE_WORDS = frozenset(("0", "false", "no", "off"))


def coerce_flag(value: Any) -> bool:
    """Coerce a boolean field value; text must be an explicit yes/no word."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    raise ValueError(f"{value!r} is not a boolean flag")


# Scalar fields a host may set directly, with their coercion
FIELD_COERCIONS = {
    'framework': Framework.from_value,
    'url': str,
    'test_name': str,
    'description': str,
    'browser': Browser.from_value,
    'viewport': Viewport.from_value,
    'network': NetworkProfile.from_value,
    'use_page_objects': coerce_flag,
    'is_bdd': coerce_flag,
    'test_runner': TestRunner.from_value,
    'coding_standards': str,
    'test_data': str,
}


def resolve_default_framework(value: Optional[str]) -> Framework:
    """Resolve a configured default framework, falling back on unknown names."""
    if not value:
        return DEFAULT_FRAMEWORK
    try:
        return Framework.from_value(value)
    except UnknownFrameworkError:
        return DEFAULT_FRAMEWORK


class WizardController:
    """Drives one wizard session."""

    def __init__(
        self,
        corpus: CorpusStore,
        generator: Optional[RandomDataGenerator] = None,
        compiler: Optional[PromptCompiler] = None,
        default_framework: Union[Framework, str, None] = None,
        copy_feedback_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[StructuredLogger] = None,
        stage: int = Stage.FRAMEWORK
    ):
        self._corpus = corpus
        self._generator = generator or RandomDataGenerator(corpus)
        self._compiler = compiler or PromptCompiler()
        if default_framework is None:
            default_framework = EnvironmentConfig.DEFAULT_FRAMEWORK
        self._default_framework = resolve_default_framework(default_framework)
        if copy_feedback_seconds is None:
            copy_feedback_seconds = EnvironmentConfig.COPY_FEEDBACK_SECONDS
        self._copy_feedback_seconds = copy_feedback_seconds
        self._clock = clock
        self._logger = logger or get_logger()

        try:
            self._stage = Stage(stage)
        except ValueError:
            raise InvalidStageError(f"Stage must be between {int(Stage.FRAMEWORK)} and {int(Stage.CONFIGURATION)}, got {stage}") from None

        self.config = TestConfiguration(framework=self._default_framework)
        self._copied_until: Optional[float] = None

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self._stage

    def advance(self) -> Stage:
        return self._move_to(min(self._stage + 1, Stage.CONFIGURATION))

    def retreat(self) -> Stage:
        return self._move_to(max(self._stage - 1, Stage.FRAMEWORK))

    def _move_to(self, stage: int) -> Stage:
        previous = self._stage
        self._stage = Stage(stage)
        if self._stage != previous:
            self._logger.log_stage_change(int(previous), int(self._stage))
        return self._stage

    def editable_fields(self) -> Tuple[str, ...]:
        """Fields the current stage presents for editing."""
        return self._stage.editable_fields(self.config.framework)

    # ------------------------------------------------------------------
    # Field edits
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> Effects:
        """Set one scalar configuration field, coercing closed options."""
        coerce = FIELD_COERCIONS.get(name)
        if coerce is None:
            raise AttributeError(f"{name!r} is not a settable configuration field")
        setattr(self.config, name, coerce(value))
        return []

    def add_step(self) -> TestStep:
        return self.config.step_editor.add()

    def update_step(self, step_id: str, field_name: str, value: str) -> bool:
        return self.config.step_editor.update(step_id, field_name, value)

    def remove_step(self, step_id: str) -> bool:
        return self.config.step_editor.remove(step_id)

    def add_selector(self):
        return self.config.selector_editor.add()

    def update_selector(self, selector_id: str, field_name: str, value: str) -> bool:
        return self.config.selector_editor.update(selector_id, field_name, value)

    def remove_selector(self, selector_id: str) -> bool:
        return self.config.selector_editor.remove(selector_id)

    # ------------------------------------------------------------------
    # Bulk mutations
    # ------------------------------------------------------------------

    def load_demo(self, framework: Union[Framework, str]) -> Effects:
        """Overwrite the scenario fields from the framework's demo.

        Environment, options, test data and the current stage are untouched.
        """
        demo = self._corpus.get_demo(Framework.from_value(framework))
        config = self.config
        config.framework = demo.framework
        config.url = demo.url
        config.test_name = demo.test_name
        config.description = demo.description
        config.steps = demo.copy_steps()
        config.selectors = demo.copy_selectors()
        config.coding_standards = demo.coding_standards

        self._logger.info("demo_loaded", framework=demo.framework.value)
        return [Notify(
            "Demo Scenario Loaded",
            f"Successfully loaded a finished example for {demo.framework.value}."
        )]

    def reset_wizard(self) -> Effects:
        """Restore every field to its default and go back to stage 1."""
        self.config.reset(self._default_framework)
        self._copied_until = None
        self._move_to(Stage.FRAMEWORK)
        self._logger.info("wizard_reset", framework=self._default_framework.value)
        return [Notify("Wizard Reset", "All inputs have been cleared.")]

    def apply_template(self, template_id: str) -> Effects:
        """Replace steps and selectors with a catalog template's."""
        template = self._corpus.get_template(template_id)
        if template is None:
            return []
        config = self.config
        config.test_name = template.title
        config.description = template.description
        steps = []
        for action in template.steps:
            steps.append(TestStep(id=config.step_ids.next_id(s.id for s in steps), action=action))
        config.steps = steps or config.steps
        config.selectors = []
        for name, value in template.selectors.items():
            selector = config.selector_editor.add()
            config.selector_editor.update(selector.id, 'name', name)
            config.selector_editor.update(selector.id, 'selector', value)

        self._logger.info("template_applied", template_id=template.id)
        return [Notify("Template Applied", f"Loaded the '{template.title}' template into the wizard.")]

    # ------------------------------------------------------------------
    # Test data and imports
    # ------------------------------------------------------------------

    def generate_random_data(self, kind: Union[DataKind, str]) -> Effects:
        """Append one synthetic value to the test data buffer."""
        value = self._generator.generate(kind)
        if not value:
            self._logger.debug("data_generation_skipped", kind=str(kind))
            return []
        self.config.test_data = append_record(self.config.test_data, value)
        return [Notify("Data Generated", f"Added a random {DataKind.from_value(kind).value} to test data.")]

    def receive_file(
        self,
        raw_text: str,
        target: Union[ImportTarget, str],
        file_name: Optional[str] = None
    ) -> Effects:
        """Apply uploaded file content to its target.

        A "File Uploaded" notification is always emitted, including after a
        format error.
        """
        target = ImportTarget.from_value(target)
        display_name = file_name or "File"
        effects: Effects = []

        if target is ImportTarget.DATA:
            self.config.test_data = raw_text
            self._logger.log_import(target.value, "replaced", file_name=file_name, entries=1)
        else:
            result = parse_selectors(raw_text, self.config.selector_ids)
            if result.outcome is ImportOutcome.REPLACED:
                self.config.selectors = result.selectors
            elif result.outcome is ImportOutcome.MALFORMED:
                effects.append(Notify(
                    "Format Error",
                    "Could not parse selector file as JSON. Switching to manual input.",
                    Severity.DESTRUCTIVE
                ))
            self._logger.log_import(
                target.value,
                result.outcome.value,
                file_name=file_name,
                entries=len(result.selectors),
                error=result.error
            )

        effects.append(Notify("File Uploaded", f"{display_name} has been processed successfully."))
        return effects

    # ------------------------------------------------------------------
    # Prompt output
    # ------------------------------------------------------------------

    def compile_prompt(self) -> str:
        prompt = self._compiler.compile(self.config)
        self._logger.log_compilation(
            framework=self.config.framework.value,
            steps=len(self.config.steps),
            selectors=len(self.config.selectors),
            chars=len(prompt)
        )
        return prompt

    def copy_prompt(self) -> Effects:
        """Request a clipboard write of the current prompt."""
        self._copied_until = self._clock() + self._copy_feedback_seconds
        return [
            WriteClipboard(self.compile_prompt()),
            Notify("Prompt Copied!", "The LLM prompt has been copied to your clipboard."),
        ]

    @property
    def is_copied(self) -> bool:
        """True while the transient copy feedback window is open."""
        return self._copied_until is not None and self._clock() < self._copied_until

    def copy_template_steps(self, template_id: str) -> Effects:
        template = self._corpus.get_template(template_id)
        if template is None:
            return []
        return [
            WriteClipboard(format_template_steps(template)),
            Notify("Steps Copied", f"You can now paste these into the Automation Wizard Step {int(Stage.STEPS)}."),
        ]
