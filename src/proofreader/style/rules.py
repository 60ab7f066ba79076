"""Style rules: heuristic patterns flagged independently of spelling."""

import re
from collections.abc import Iterable
from typing import ClassVar

from ..models.results import StyleSuggestion
from . import phrases

# Sentence start: beginning of text or after terminal punctuation
SENTENCE_START = r"(?:^\s*|(?<=[.!?])\s+|(?<=[.!?][\"')\]])\s+)"


def phrase_pattern(words: Iterable[str]) -> re.Pattern[str]:
    """
    Compile a case-insensitive alternation of phrases.

    Longer phrases win over their prefixes; whitespace inside a phrase
    matches any run of whitespace and straight apostrophes also match
    curly ones.
    """
    alternatives = []
    for phrase in sorted(set(words), key=lambda p: (-len(p), p)):
        escaped = re.escape(phrase.strip())
        escaped = escaped.replace(r"\ ", r"\s+").replace("'", "['’]")
        alternatives.append(escaped)
    return re.compile(r"(?<!\w)(?:" + "|".join(alternatives) + r")(?!\w)", re.IGNORECASE)


class StyleRule:
    """
    Base class for style rules.

    Subclasses set ``name`` (the settings option that toggles them),
    ``message`` (appended to the quoted match to form the reason) and
    ``pattern``; ``group`` selects the reported part of each match.
    """

    name: ClassVar[str]
    message: ClassVar[str]
    pattern: ClassVar[re.Pattern[str]]
    group: ClassVar[int] = 0

    def accept(self, match: re.Match[str]) -> bool:
        return True

    def evaluate(self, text: str) -> list[StyleSuggestion]:
        """Every match of this rule in ``text``, in order of position."""
        suggestions = []
        for match in self.pattern.finditer(text):
            if not self.accept(match):
                continue
            start, end = match.span(self.group)
            suggestions.append(
                StyleSuggestion(
                    reason=f'"{text[start:end]}" {self.message}',
                    index=start,
                    offset=end - start,
                    rule=self.name,
                )
            )
        return suggestions


class PassiveVoice(StyleRule):
    """A form of 'to be' followed by a past participle."""

    name = "passive"
    message = "may be passive voice"
    pattern = re.compile(
        r"\b(?:am|are|were|being|is|been|was|be)\s+"
        r"(?:[a-z]+ed|" + "|".join(phrases.IRREGULAR_PARTICIPLES) + r")\b",
        re.IGNORECASE,
    )

    def accept(self, match: re.Match[str]) -> bool:
        participle = match.group(0).split()[-1].lower()
        return participle not in phrases.NOT_PARTICIPLES


class LexicalIllusion(StyleRule):
    """The same word twice in a row, as in 'the the'."""

    name = "illusion"
    message = "is repeated"
    pattern = re.compile(r"\b([^\W\d_]+)\s+\1\b", re.IGNORECASE)


class StartsWithSo(StyleRule):
    """Sentences opening with 'So'."""

    name = "so"
    message = "adds no meaning"
    pattern = re.compile(SENTENCE_START + r"(so)\b(?!-)(?=\W+\w)", re.IGNORECASE)
    group = 1


class ThereIs(StyleRule):
    """Sentences opening with 'There is' or 'There are'."""

    name = "there_is"
    message = "is unnecessary verbiage"
    pattern = re.compile(SENTENCE_START + r"(there\s+(?:is|are))\b", re.IGNORECASE)
    group = 1


class WeaselWords(StyleRule):
    name = "weasel"
    message = "is a weasel word"
    pattern = phrase_pattern(phrases.WEASEL_WORDS)


class Adverbs(StyleRule):
    name = "adverb"
    message = "can weaken meaning"
    pattern = phrase_pattern(phrases.ADVERBS)


class Wordiness(StyleRule):
    name = "too_wordy"
    message = "is wordy or unneeded"
    pattern = phrase_pattern(phrases.WORDY_PHRASES)


class Cliches(StyleRule):
    name = "cliches"
    message = "is a cliche"
    pattern = phrase_pattern(phrases.CLICHES)


class EPrime(StyleRule):
    """Any form of 'to be' (E-Prime style)."""

    name = "eprime"
    message = "is a form of 'to be'"
    pattern = phrase_pattern(phrases.TO_BE)


# Evaluation order; also the tie-break for suggestions at the same position
RULES: tuple[type[StyleRule], ...] = (
    PassiveVoice,
    LexicalIllusion,
    StartsWithSo,
    ThereIs,
    WeaselWords,
    Adverbs,
    Wordiness,
    Cliches,
    EPrime,
)
