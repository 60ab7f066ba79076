"""Result types produced by the proofreading pipeline."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class TextUnit:
    """
    One contiguous block of extractable text.

    Attributes:
        index: Position of the unit in document order (0-based)
        text: Whitespace-normalized text content
        element: Source element the text was collected from
    """

    index: int
    text: str
    element: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SpellingSuggestion:
    """A word rejected by every active dictionary."""

    word: str
    suggestions: tuple[str, ...] = ()
    offset: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "suggestions": list(self.suggestions),
            "offset": self.offset,
        }


@dataclass(frozen=True)
class StyleSuggestion:
    """
    A span flagged by a style rule.

    Attributes:
        reason: Human-readable explanation
        index: Start offset of the matched span within the unit text
        offset: Length of the matched span
        rule: Name of the rule that produced it
    """

    reason: str
    index: int
    offset: int
    rule: str = ""

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) of the matched text."""
        return (self.index, self.index + self.offset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "offset": self.offset,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class ProofreadResult:
    """
    Suggestions for a single text unit.

    A result with no suggestions and no error is clean. A result whose
    analysis failed carries no suggestions and an ``error`` message.
    """

    text: str
    index: int = 0
    spelling: tuple[SpellingSuggestion, ...] = ()
    write_good: tuple[StyleSuggestion, ...] = ()
    error: Optional[str] = None

    @property
    def suggestions(self) -> dict[str, list[Any]]:
        return {"spelling": list(self.spelling), "writeGood": list(self.write_good)}

    @property
    def has_suggestions(self) -> bool:
        return bool(self.spelling or self.write_good)

    @property
    def degraded(self) -> bool:
        return self.error is not None

    @property
    def is_clean(self) -> bool:
        return not self.has_suggestions and not self.degraded

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "text": self.text,
            "suggestions": {
                "spelling": [item.to_dict() for item in self.spelling],
                "writeGood": [item.to_dict() for item in self.write_good],
            },
        }
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass
class FileResult:
    """Results for one proofread document."""

    file: str
    results: list[ProofreadResult] = field(default_factory=list)

    def with_suggestions(self) -> "FileResult":
        """Copy of this result holding only non-clean units."""
        return FileResult(file=self.file, results=[r for r in self.results if not r.is_clean])

    @property
    def has_suggestions(self) -> bool:
        return any(r.has_suggestions for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "results": [r.to_dict() for r in self.results]}


def has_suggestions(file_results: list[FileResult]) -> bool:
    """Whether any document produced at least one suggestion."""
    return any(f.has_suggestions for f in file_results)
