"""
proofreader - Spell and style check HTML and Markdown documents.

Usage:
    from proofreader import Proofreader, ProofreaderConfig

    config = ProofreaderConfig.default()

    async with Proofreader.from_config(config) as proofreader:
        for result in await proofreader.proofread("<p>Teh cat sat.</p>"):
            print(result.to_dict())
"""

__version__ = "1.0.0"

from .conversion import MarkupNormalizer, TextExtractor
from .core.proofreader import Proofreader
from .errors import (
    ConfigurationError,
    DictionaryLoadError,
    ProofreaderError,
    UnitAnalysisError,
)
from .models.config import (
    DictionaryConfig,
    PerformanceConfig,
    ProofreaderConfig,
    SelectorConfig,
    StyleSettings,
)
from .models.results import (
    FileResult,
    ProofreadResult,
    SpellingSuggestion,
    StyleSuggestion,
    TextUnit,
    has_suggestions,
)
from .sources import Source, SourceLoader
from .spelling import Dictionary, DictionaryEngine, DictionaryLocator
from .style import StyleChecker

__all__ = [
    "__version__",
    # Core
    "Proofreader",
    "DictionaryEngine",
    "DictionaryLocator",
    "Dictionary",
    "StyleChecker",
    "MarkupNormalizer",
    "TextExtractor",
    # Config
    "ProofreaderConfig",
    "SelectorConfig",
    "DictionaryConfig",
    "StyleSettings",
    "PerformanceConfig",
    # Results
    "TextUnit",
    "SpellingSuggestion",
    "StyleSuggestion",
    "ProofreadResult",
    "FileResult",
    "has_suggestions",
    # Sources
    "Source",
    "SourceLoader",
    # Errors
    "ProofreaderError",
    "ConfigurationError",
    "DictionaryLoadError",
    "UnitAnalysisError",
]
