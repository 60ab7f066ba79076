"""Protocol definitions for the proofreading pipeline."""

from typing import Protocol, runtime_checkable

from bs4 import Tag

from ..models.results import StyleSuggestion


@runtime_checkable
class SelectorMatcher(Protocol):
    """
    Capability for deciding whether an element belongs to a region.

    The extractor only depends on this protocol, not on a particular
    selector engine.
    """

    def matches(self, element: Tag) -> bool:
        """Whether ``element`` itself matches."""
        ...


class SpellChecker(Protocol):
    """
    Protocol for spelling backends (see ``DictionaryEngine``).

    A backend may also expose a ``wordchars`` string; its characters
    are then kept inside words when text is tokenized.
    """

    def check(self, word: str) -> bool: ...

    def suggest(self, word: str) -> list[str]: ...


class StyleAnalyzer(Protocol):
    """Protocol for style backends (see ``StyleChecker``)."""

    def analyze(self, text: str) -> list[StyleSuggestion]: ...
