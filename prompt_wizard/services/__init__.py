"""
Wizard services - corpus access, data generation, import parsing,
prompt compilation and the stage controller.
"""
from .corpus import CorpusStore, get_corpus
from .data_generator import RandomDataGenerator, append_record
from .import_parser import ImportOutcome, SelectorImportResult, parse_selectors
from .prompt_compiler import PromptCompiler, compile_prompt, format_template_steps
from .telemetry import StructuredLogger, StructuredFormatter, get_logger
from .wizard import WizardController, resolve_default_framework

__all__ = [
    'CorpusStore',
    'get_corpus',
    'RandomDataGenerator',
    'append_record',
    'ImportOutcome',
    'SelectorImportResult',
    'parse_selectors',
    'PromptCompiler',
    'compile_prompt',
    'format_template_steps',
    'StructuredLogger',
    'StructuredFormatter',
    'get_logger',
    'WizardController',
    'resolve_default_framework',
]
