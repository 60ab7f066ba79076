"""Spell checking against Hunspell dictionaries and custom word lists."""

from .affix import AffixEntry, AffixFile
from .dictionary import Dictionary
from .engine import DictionaryEngine, DictionaryLocator
from .tokenizer import tokenize

__all__ = [
    "AffixEntry",
    "AffixFile",
    "Dictionary",
    "DictionaryEngine",
    "DictionaryLocator",
    "tokenize",
]
