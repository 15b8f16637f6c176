"""
Environment Configuration Module

Loads environment variables for the prompt wizard. Reference data (demo
scenarios, templates, word lists) lives in data/corpus.yaml.
"""
import os
from typing import Optional
from pathlib import Path

# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent / '.env'
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
except (PermissionError, OSError):
    pass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class EnvironmentConfig:
    """Environment configuration loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.getenv("PROMPT_WIZARD_LOG_LEVEL", "INFO").upper()
    LOG_JSON: bool = _env_flag("PROMPT_WIZARD_LOG_JSON", "true")

    # Seconds the "copied" flag stays raised after a clipboard write
    COPY_FEEDBACK_SECONDS: float = float(os.getenv("PROMPT_WIZARD_COPY_FEEDBACK_SECONDS", "2.0"))

    # Optional override for the bundled corpus
    CORPUS_PATH: Optional[str] = os.getenv("PROMPT_WIZARD_CORPUS_PATH")

    # Framework selected at session start and after a reset
    DEFAULT_FRAMEWORK: Optional[str] = os.getenv("PROMPT_WIZARD_DEFAULT_FRAMEWORK")

    @classmethod
    def get_corpus_path(cls) -> Path:
        """Get the corpus YAML path, falling back to the bundled file."""
        if cls.CORPUS_PATH:
            return Path(cls.CORPUS_PATH)
        return Path(__file__).parent.parent / "data" / "corpus.yaml"

    @classmethod
    def get_logging_config(cls) -> dict:
        """Get logging configuration as a dictionary."""
        return {
            'level': cls.LOG_LEVEL,
            'json': cls.LOG_JSON,
        }
