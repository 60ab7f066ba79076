"""Proofreader configuration and result models."""

from .config import (
    DictionaryConfig,
    PerformanceConfig,
    ProofreaderConfig,
    SelectorConfig,
    StyleSettings,
)
from .results import (
    FileResult,
    ProofreadResult,
    SpellingSuggestion,
    StyleSuggestion,
    TextUnit,
    has_suggestions,
)

__all__ = [
    # Config
    "DictionaryConfig",
    "PerformanceConfig",
    "ProofreaderConfig",
    "SelectorConfig",
    "StyleSettings",
    # Results
    "FileResult",
    "ProofreadResult",
    "SpellingSuggestion",
    "StyleSuggestion",
    "TextUnit",
    "has_suggestions",
]
