"""Exception hierarchy for proofreader."""

from typing import Optional


class ProofreaderError(Exception):
    """Base class for all proofreader errors."""


class ConfigurationError(ProofreaderError, ValueError):
    """
    Raised for unusable configuration.

    Missing or empty whitelist, invalid selectors, no dictionaries or an
    invalid settings file. Always fatal: nothing is proofread.
    """


class DictionaryLoadError(ProofreaderError):
    """Raised when a dictionary is missing, unreadable or malformed."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class UnitAnalysisError(ProofreaderError):
    """
    Raised when analysing a single text unit fails.

    Never escapes the orchestrator: it is recorded on the unit's result.
    """

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Analysis of unit {index} failed: {cause}")
        self.index = index
        self.cause = cause
