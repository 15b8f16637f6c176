"""
Tests for Prompt Wizard.

Test modules:
- test_models: Tests for domain entities and enumerations
- unit/test_corpus: Tests for the corpus store
- unit/test_data_generator: Tests for random test data
- unit/test_import_parser: Tests for selector and data imports
- unit/test_prompt_compiler: Tests for prompt compilation
- unit/test_wizard: Tests for the stage controller
- unit/test_infrastructure: Tests for sinks, dispatcher and file reader
- unit/test_environment: Tests for environment configuration
- unit/test_cli: Tests for the command-line host
"""
