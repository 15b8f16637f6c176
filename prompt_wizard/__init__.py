"""
Prompt Wizard - compiles a web UI test scenario into an LLM prompt.
"""
__version__ = "1.0.0"
