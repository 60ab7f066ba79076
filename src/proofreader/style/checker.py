"""Style checker running the configured set of style rules."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import StyleSettings
from ..models.results import StyleSuggestion
from .rules import RULES, StyleRule

logger = logging.getLogger(__name__)


class StyleChecker:
    """
    Flags weak phrasing in a block of text.

    Rules are toggled through ``StyleSettings``; rules are stateless, so
    one checker can be shared between threads once configured.

    Example:
        checker = StyleChecker({"weasel": False})
        for suggestion in checker.analyze("The cake was eaten."):
            print(suggestion.reason)  # "was eaten" may be passive voice
    """

    def __init__(self, settings: Optional[Union[StyleSettings, Mapping[str, Any]]] = None) -> None:
        self._settings = StyleSettings()
        self._rules: tuple[StyleRule, ...] = ()
        self._whitelist: frozenset[str] = frozenset()
        self.configure(settings)

    @property
    def settings(self) -> StyleSettings:
        return self._settings

    @property
    def rules(self) -> tuple[StyleRule, ...]:
        """Active rules in evaluation order."""
        return self._rules

    def configure(self, settings: Optional[Union[StyleSettings, Mapping[str, Any]]] = None) -> None:
        """
        Select the active rules.

        Args:
            settings: ``StyleSettings`` or a mapping of write-good option
                names to booleans; None restores the defaults

        Raises:
            ConfigurationError: If the mapping holds unknown options
        """
        if settings is None:
            settings = StyleSettings()
        elif not isinstance(settings, StyleSettings):
            try:
                settings = StyleSettings.model_validate(dict(settings))
            except ValidationError as e:
                raise ConfigurationError(f"Invalid style settings: {e}") from e

        self._settings = settings
        self._rules = tuple(rule() for rule in RULES if getattr(settings, rule.name))
        self._whitelist = frozenset(" ".join(p.lower().split()) for p in settings.whitelist)
        logger.debug(f"Style rules enabled: {', '.join(r.name for r in self._rules) or 'none'}")

    def analyze(self, text: str) -> list[StyleSuggestion]:
        """
        Run every active rule over ``text``.

        Returns:
            Suggestions ordered by position. Rules flagging the exact same
            span are merged into one suggestion ("... is a weasel word and
            can weaken meaning").
        """
        if not text or not text.strip():
            return []

        found: list[tuple[int, int, StyleSuggestion]] = []
        for order, rule in enumerate(self._rules):
            for suggestion in rule.evaluate(text):
                matched = text[suggestion.index : suggestion.index + suggestion.offset]
                if " ".join(matched.lower().split()) in self._whitelist:
                    continue
                found.append((suggestion.index, order, suggestion))
        found.sort(key=lambda item: (item[0], item[1]))

        merged: dict[tuple[int, int], StyleSuggestion] = {}
        for _, _, suggestion in found:
            key = (suggestion.index, suggestion.offset)
            previous = merged.get(key)
            if previous is None:
                merged[key] = suggestion
                continue
            # Drop the quoted span from the second reason before joining
            tail = suggestion.reason[suggestion.offset + 3 :]
            merged[key] = StyleSuggestion(
                reason=f"{previous.reason} and {tail}",
                index=previous.index,
                offset=previous.offset,
                rule=previous.rule,
            )
        return list(merged.values())
