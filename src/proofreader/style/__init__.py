"""Style checking: passive voice, weasel words, wordiness and friends."""

from .checker import StyleChecker
from .rules import (
    RULES,
    Adverbs,
    Cliches,
    EPrime,
    LexicalIllusion,
    PassiveVoice,
    StartsWithSo,
    StyleRule,
    ThereIs,
    WeaselWords,
    Wordiness,
)

__all__ = [
    "StyleChecker",
    # Rules
    "RULES",
    "StyleRule",
    "PassiveVoice",
    "LexicalIllusion",
    "StartsWithSo",
    "ThereIs",
    "WeaselWords",
    "Adverbs",
    "Wordiness",
    "Cliches",
    "EPrime",
]
