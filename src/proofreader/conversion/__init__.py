"""Document conversion: Markdown to HTML and text extraction."""

from .extractor import CssSelectorMatcher, TextExtractor
from .markup import MarkupNormalizer, resolve_media_type
from .protocols import SelectorMatcher, SpellChecker, StyleAnalyzer

__all__ = [
    # Protocols
    "SelectorMatcher",
    "SpellChecker",
    "StyleAnalyzer",
    # Implementations
    "CssSelectorMatcher",
    "TextExtractor",
    "MarkupNormalizer",
    "resolve_media_type",
]
