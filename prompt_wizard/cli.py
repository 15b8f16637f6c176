#!/usr/bin/env python3
"""
Prompt Wizard CLI
Assembles a test configuration from command-line options and prints the
compiled LLM prompt.
"""
import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

from prompt_wizard.domain import (
    Browser,
    DataKind,
    Framework,
    ImportTarget,
    NetworkProfile,
    PromptWizardError,
    TestRunner,
    Viewport,
)
from prompt_wizard.infrastructure import AsyncFileReader, EffectDispatcher, LoggingNotificationSink, MemoryClipboard
from prompt_wizard.services import RandomDataGenerator, WizardController, get_corpus


def _choices(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-wizard",
        description="Compile a web UI test scenario into an LLM prompt for test code generation."
    )
    parser.add_argument("--framework", choices=_choices(Framework), help="Automation framework and language")
    parser.add_argument("--demo", choices=_choices(Framework), help="Start from the demo scenario for a framework")
    parser.add_argument("--template", help="Start from a catalog template (see --list-templates)")
    parser.add_argument("--list-templates", action="store_true", help="List catalog templates and exit")
    parser.add_argument("--url", help="Base URL of the application under test")
    parser.add_argument("--name", help="Test case name")
    parser.add_argument("--description", help="Short scenario description")
    parser.add_argument(
        "--step", action="append", default=[], metavar="ACTION[|EXPECTED]",
        help="Test step; repeat for more. Replaces the starting steps."
    )
    parser.add_argument("--browser", choices=_choices(Browser))
    parser.add_argument("--viewport", choices=_choices(Viewport))
    parser.add_argument("--network", choices=_choices(NetworkProfile))
    parser.add_argument("--no-pom", action="store_true", help="Do not ask for the Page Object Model")
    parser.add_argument("--bdd", action="store_true", help="Ask for Gherkin feature files")
    parser.add_argument("--runner", choices=_choices(TestRunner), help="Test runner (Java frameworks)")
    parser.add_argument("--standards", help="Custom coding standards")
    parser.add_argument("--selectors", metavar="FILE", help="JSON selector file to import")
    parser.add_argument("--data", metavar="FILE", help="Test data file to import")
    parser.add_argument(
        "--generate", action="append", default=[], choices=_choices(DataKind),
        help="Append a random test data value; repeat for more"
    )
    parser.add_argument("--seed", type=int, help="Seed for random test data")
    return parser


def _apply_steps(controller: WizardController, raw_steps: List[str]) -> None:
    old_ids = [step.id for step in controller.config.steps]
    for raw in raw_steps:
        action, _, expected = raw.partition("|")
        step = controller.add_step()
        controller.update_step(step.id, 'action', action.strip())
        controller.update_step(step.id, 'expected', expected.strip())
    for step_id in old_ids:
        controller.remove_step(step_id)


def run(argv: Optional[List[str]] = None, out=None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)

    try:
        corpus = get_corpus()
    except PromptWizardError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.list_templates:
        for template in corpus.list_templates():
            print(f"{template.id:<14} [{template.category.value}] {template.title}", file=out)
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    controller = WizardController(corpus, generator=RandomDataGenerator(corpus, rng=rng))
    dispatcher = EffectDispatcher(LoggingNotificationSink(), MemoryClipboard())

    if args.demo:
        dispatcher.dispatch(controller.load_demo(args.demo))
    if args.template:
        effects = controller.apply_template(args.template)
        if not effects:
            print(f"ERROR: Unknown template {args.template!r}", file=sys.stderr)
            return 1
        dispatcher.dispatch(effects)

    for option, field_name in (
        ('framework', 'framework'), ('url', 'url'), ('name', 'test_name'),
        ('description', 'description'), ('browser', 'browser'), ('viewport', 'viewport'),
        ('network', 'network'), ('runner', 'test_runner'), ('standards', 'coding_standards'),
    ):
        value = getattr(args, option)
        if value is not None:
            controller.set_field(field_name, value)
    if args.no_pom:
        controller.set_field('use_page_objects', False)
    if args.bdd:
        controller.set_field('is_bdd', True)
    if args.step:
        _apply_steps(controller, args.step)

    uploads = [(path, target) for path, target in (
        (args.selectors, ImportTarget.SELECTORS), (args.data, ImportTarget.DATA)
    ) if path]
    if uploads:
        with AsyncFileReader() as reader:
            pending = [(reader.read(path, target), target, path) for path, target in uploads]
            for future, target, path in pending:
                try:
                    raw_text = future.result()
                except (OSError, UnicodeDecodeError) as e:
                    print(f"ERROR: Could not read {path}: {e}", file=sys.stderr)
                    return 1
                dispatcher.dispatch(controller.receive_file(raw_text, target, file_name=Path(path).name))

    for kind in args.generate:
        dispatcher.dispatch(controller.generate_random_data(kind))

    out.write(controller.compile_prompt())
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
