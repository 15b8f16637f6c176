"""Tests for the wizard stage controller."""
import random

import pytest

from prompt_wizard.domain import (
    Browser,
    Framework,
    InvalidStageError,
    Stage,
    UnknownFrameworkError,
    Viewport,
)
from prompt_wizard.interfaces import Notify, WriteClipboard
from prompt_wizard.services import WizardController, compile_prompt, resolve_default_framework


class TestStages:
    """Stage transitions."""

    def test_starts_at_stage_one(self, controller):
        assert controller.stage is Stage.FRAMEWORK

    def test_advance_clamps_at_six(self, controller):
        for _ in range(10):
            controller.advance()
        assert controller.stage == 6

    def test_retreat_clamps_at_one(self, controller):
        controller.advance()
        for _ in range(5):
            controller.retreat()
        assert controller.stage == 1

    def test_advance_one_at_a_time(self, controller):
        assert [controller.advance() for _ in range(5)] == [2, 3, 4, 5, 6]

    def test_invalid_initial_stage(self, corpus, quiet_logger):
        with pytest.raises(InvalidStageError):
            WizardController(corpus, logger=quiet_logger, stage=7)

    def test_editable_fields_follow_stage(self, controller):
        controller.advance()
        assert controller.editable_fields() == ('url', 'test_name', 'description')

    def test_stage_does_not_gate_compilation(self, controller):
        controller.advance()
        controller.set_field('url', "https://example.com")
        for _ in range(4):
            controller.advance()

        assert "https://example.com" in controller.compile_prompt()


class TestFieldEdits:

    def test_set_field_coerces_options(self, controller):
        controller.set_field('browser', "WebKit")
        controller.set_field('viewport', "iPad Air (Tablet)")

        assert controller.config.browser is Browser.WEBKIT
        assert controller.config.viewport is Viewport.IPAD_AIR

    def test_set_field_rejects_free_framework(self, controller):
        with pytest.raises(UnknownFrameworkError):
            controller.set_field('framework', "Selenium Rust")
        assert controller.config.framework is Framework.PLAYWRIGHT_PYTHON

    @pytest.mark.parametrize("value, expected", [
        (False, False),
        (True, True),
        ("false", False),
        ("No", False),
        ("0", False),
        (" true ", True),
        ("yes", True),
    ])
    def test_set_field_parses_flags(self, controller, value, expected):
        controller.set_field('is_bdd', not expected)
        controller.set_field('is_bdd', value)
        controller.set_field('use_page_objects', value)

        assert controller.config.is_bdd is expected
        assert controller.config.use_page_objects is expected

    @pytest.mark.parametrize("value", ["maybe", "", None, 2])
    def test_set_field_rejects_unclear_flags(self, controller, value):
        with pytest.raises(ValueError):
            controller.set_field('is_bdd', value)
        assert controller.config.is_bdd is False

    def test_set_field_rejects_lists(self, controller):
        with pytest.raises(AttributeError):
            controller.set_field('steps', [])

    def test_steps_never_empty(self, controller):
        rng = random.Random(99)
        for _ in range(300):
            op = rng.choice(["add", "remove", "remove", "reset", "demo"])
            if op == "add":
                controller.add_step()
            elif op == "remove":
                controller.remove_step(rng.choice(controller.config.steps).id)
            elif op == "reset":
                controller.reset_wizard()
            else:
                controller.load_demo(rng.choice(list(Framework)))
            assert len(controller.config.steps) >= 1

    def test_remove_last_step_refused(self, controller):
        only = controller.config.steps[0]
        assert controller.remove_step(only.id) is False
        assert controller.config.steps == [only]

    def test_selector_edits(self, controller):
        selector = controller.add_selector()
        controller.update_selector(selector.id, 'name', "search")
        assert controller.config.selectors[-1].name == "search"
        assert controller.remove_selector(selector.id) is True
        assert controller.remove_selector("1") is True
        assert controller.config.selectors == []


class TestLoadDemo:

    def test_overwrites_scenario_fields(self, controller, corpus):
        effects = controller.load_demo("Selenium Java")
        demo = corpus.get_demo(Framework.SELENIUM_JAVA)
        config = controller.config

        assert config.framework is Framework.SELENIUM_JAVA
        assert config.url == demo.url
        assert config.test_name == "Admin Dashboard Navigation"
        assert config.description == demo.description
        assert [s.action for s in config.steps] == [s.action for s in demo.steps]
        assert [s.selector for s in config.selectors] == [s.selector for s in demo.selectors]
        assert config.coding_standards == demo.coding_standards
        assert effects == [Notify(
            "Demo Scenario Loaded",
            "Successfully loaded a finished example for Selenium Java."
        )]

    def test_leaves_other_fields_and_stage(self, controller):
        controller.advance()
        controller.advance()
        controller.set_field('browser', Browser.FIREFOX)
        controller.set_field('is_bdd', True)
        controller.set_field('use_page_objects', False)
        controller.set_field('test_runner', "TestNG")
        controller.set_field('test_data', "row")

        controller.load_demo(Framework.CYPRESS_JAVASCRIPT)

        config = controller.config
        assert controller.stage == 3
        assert config.browser is Browser.FIREFOX
        assert config.is_bdd is True
        assert config.use_page_objects is False
        assert config.test_runner.value == "TestNG"
        assert config.test_data == "row"

    def test_editing_loaded_demo_does_not_touch_corpus(self, controller, corpus):
        controller.load_demo(Framework.SELENIUM_PYTHON)
        step_id = controller.config.steps[0].id
        controller.update_step(step_id, 'action', "changed")

        assert corpus.get_demo(Framework.SELENIUM_PYTHON).steps[0].action != "changed"

    def test_unknown_framework(self, controller):
        with pytest.raises(UnknownFrameworkError):
            controller.load_demo("Watir Ruby")


class TestReset:

    def _scramble(self, controller):
        controller.load_demo(Framework.SELENIUM_CSHARP)
        controller.set_field('browser', "Cross-Browser")
        controller.set_field('network', "Offline")
        controller.set_field('is_bdd', True)
        controller.add_step()
        controller.generate_random_data("name")
        for _ in range(4):
            controller.advance()

    def test_reset_returns_to_defaults(self, controller, corpus, quiet_logger):
        self._scramble(controller)
        effects = controller.reset_wizard()

        fresh = WizardController(corpus, default_framework=Framework.PLAYWRIGHT_PYTHON, logger=quiet_logger)
        assert controller.config == fresh.config
        assert controller.stage is Stage.FRAMEWORK
        assert effects == [Notify("Wizard Reset", "All inputs have been cleared.")]

    def test_reset_then_compile_is_state_independent(self, controller, corpus, quiet_logger):
        fresh = WizardController(corpus, default_framework=Framework.PLAYWRIGHT_PYTHON, logger=quiet_logger)
        self._scramble(controller)
        controller.reset_wizard()

        assert controller.compile_prompt() == fresh.compile_prompt()

    def test_reset_uses_configured_default_framework(self, corpus, quiet_logger):
        controller = WizardController(corpus, default_framework="Selenium Python", logger=quiet_logger)
        controller.set_field('framework', "Selenium Java")
        controller.reset_wizard()

        assert controller.config.framework is Framework.SELENIUM_PYTHON


class TestCopy:

    def test_copy_prompt_effects(self, controller, dispatcher, clipboard, notifications):
        dispatcher.dispatch(controller.copy_prompt())

        assert clipboard.text == compile_prompt(controller.config)
        assert notifications.titles() == ["Prompt Copied!"]

    def test_copied_flag_is_transient(self, controller, clock):
        assert controller.is_copied is False
        controller.copy_prompt()
        assert controller.is_copied is True
        clock.advance(1.5)
        assert controller.is_copied is True
        clock.advance(1.0)
        assert controller.is_copied is False

    def test_compile_is_idempotent(self, controller):
        controller.load_demo(Framework.PLAYWRIGHT_JAVA)
        assert controller.compile_prompt() == controller.compile_prompt()


class TestTemplates:

    def test_copy_template_steps(self, controller):
        effects = controller.copy_template_steps("login-auth")

        assert isinstance(effects[0], WriteClipboard)
        assert effects[0].text.startswith("Scenario: Secure Login Workflow\nSteps:\n1. Navigate to /login\n")
        assert effects[1].title == "Steps Copied"

    def test_copy_unknown_template(self, controller):
        assert controller.copy_template_steps("nope") == []

    def test_apply_template(self, controller):
        effects = controller.apply_template("ecom-cart")
        config = controller.config

        assert config.test_name == "Add to Cart & Checkout"
        assert len(config.steps) == 6
        assert all(s.expected == "" for s in config.steps)
        assert [s.name for s in config.selectors] == ["searchBar", "firstProduct", "addBtn", "cartIcon"]
        assert len({s.id for s in config.steps}) == 6
        assert effects[0].title == "Template Applied"

    def test_apply_unknown_template(self, controller):
        before = controller.config.to_dict()
        assert controller.apply_template("nope") == []
        assert controller.config.to_dict() == before


class TestResolveDefaultFramework:

    def test_known(self):
        assert resolve_default_framework("Selenide Java") is Framework.SELENIDE_JAVA

    @pytest.mark.parametrize("value", [None, "", "Unknown Stack"])
    def test_fallback(self, value):
        assert resolve_default_framework(value) is Framework.PLAYWRIGHT_PYTHON
