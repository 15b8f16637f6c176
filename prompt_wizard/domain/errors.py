"""
Exception hierarchy for the prompt wizard.
"""


class PromptWizardError(Exception):
    """Base class for all prompt wizard errors."""


class UnknownOptionError(PromptWizardError, ValueError):
    """A string does not name a member of a closed option set."""


class UnknownFrameworkError(UnknownOptionError):
    """A string does not name one of the supported frameworks."""


class InvalidStageError(PromptWizardError, ValueError):
    """A wizard stage outside the 1..6 range."""


class CorpusError(PromptWizardError):
    """The bundled reference corpus is missing or malformed."""
