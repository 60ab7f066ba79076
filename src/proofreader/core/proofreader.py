"""Proofreader: orchestrates extraction, spell checking and style analysis."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import TracebackType
from typing import Any, Union

from ..concurrency.pool import AnalysisPool
from ..conversion.extractor import CssSelectorMatcher, TextExtractor
from ..conversion.markup import MarkupNormalizer
from ..conversion.protocols import SpellChecker, StyleAnalyzer
from ..errors import ConfigurationError, UnitAnalysisError
from ..models.config import ProofreaderConfig, StyleSettings
from ..models.results import (
    FileResult,
    ProofreadResult,
    SpellingSuggestion,
    StyleSuggestion,
    TextUnit,
)
from ..sources.loader import Source
from ..spelling.dictionary import Dictionary
from ..spelling.engine import DictionaryEngine, DictionaryLocator
from ..spelling.tokenizer import tokenize
from ..style.checker import StyleChecker

logger = logging.getLogger(__name__)

Selectors = Union[str, Sequence[str], None]


def _selector_list(selectors: Selectors) -> list[str]:
    if selectors is None:
        return []
    if isinstance(selectors, str):
        selectors = [selectors]
    return [s.strip() for s in selectors if s and s.strip()]


class Proofreader:
    """
    Proofreads HTML documents.

    Text is taken from whitelisted regions (minus blacklisted ones),
    split into units, and every unit is spell checked and style checked
    concurrently on a thread pool. Results come back in document order.

    Example:
        config = ProofreaderConfig.default()
        async with Proofreader.from_config(config) as proofreader:
            results = await proofreader.proofread("<p>Teh cat sat.</p>")
            for result in results:
                print(result.text, result.spelling, result.write_good)

    The configuration mutators (``set_whitelist`` and friends) must not
    be called while a ``proofread`` call is in flight.
    """

    def __init__(
        self,
        config: ProofreaderConfig | None = None,
        *,
        engine: SpellChecker | None = None,
        style_checker: StyleAnalyzer | None = None,
        normalizer: MarkupNormalizer | None = None,
        extractor: TextExtractor | None = None,
        max_workers: int | None = None,
    ) -> None:
        """
        Initialize the proofreader.

        Dictionaries named in ``config`` are not loaded here; use
        ``from_config`` for a ready-to-use instance.

        Args:
            config: Selector, style and performance settings
            engine: Spell checker (a fresh DictionaryEngine if None)
            style_checker: Style analyzer (a StyleChecker built from config if None)
            normalizer: Markdown-to-HTML normalizer
            extractor: HTML text extractor
            max_workers: Thread pool size (overrides config)
        """
        performance = config.performance if config else None
        self._engine: SpellChecker = engine or DictionaryEngine(
            max_suggestions=performance.max_suggestions if performance else 5
        )
        self._style: StyleAnalyzer = style_checker or StyleChecker(config.style if config else None)
        self._normalizer = normalizer or MarkupNormalizer()
        self._extractor = extractor or TextExtractor()

        self._whitelist: CssSelectorMatcher | None = None
        self._blacklist = CssSelectorMatcher([])
        if config is not None:
            self.set_whitelist(config.selectors.whitelist)
            self.set_blacklist(config.selectors.blacklist)

        workers = max_workers or (performance.max_workers if performance else 4)
        self._pool = AnalysisPool(max_workers=workers)

    @classmethod
    def from_config(
        cls,
        config: ProofreaderConfig,
        locator: DictionaryLocator | None = None,
    ) -> Proofreader:
        """
        Build a proofreader and load every configured dictionary.

        Raises:
            ConfigurationError: If no built-in dictionary is configured
            DictionaryLoadError: If any dictionary cannot be loaded
        """
        if not config.dictionaries.built_in:
            raise ConfigurationError("At least one built-in dictionary has to be set.")

        proofreader = cls(config)
        locator = locator or DictionaryLocator(config.dictionaries.search_paths)

        for name in config.dictionaries.built_in:
            dic_path, aff_path = locator.resolve(name)
            proofreader.add_dictionary(dic_path, aff_path, name=name)

        for path in config.dictionaries.custom:
            proofreader.add_dictionary(path)

        return proofreader

    # Configuration

    @property
    def whitelist(self) -> list[str]:
        return self._whitelist.selectors if self._whitelist else []

    @property
    def blacklist(self) -> list[str]:
        return self._blacklist.selectors

    @property
    def engine(self) -> SpellChecker:
        return self._engine

    @property
    def style_checker(self) -> StyleAnalyzer:
        return self._style

    def set_whitelist(self, selectors: Selectors) -> None:
        """
        Set the selectors of regions to proofread.

        Raises:
            ConfigurationError: If a selector is invalid
        """
        selectors = _selector_list(selectors)
        self._whitelist = CssSelectorMatcher(selectors) if selectors else None

    def set_blacklist(self, selectors: Selectors) -> None:
        """
        Set the selectors of regions to skip.

        Raises:
            ConfigurationError: If a selector is invalid
        """
        self._blacklist = CssSelectorMatcher(_selector_list(selectors))

    def set_style_settings(self, settings: StyleSettings | Mapping[str, Any] | None) -> None:
        """Reconfigure the style rules (write-good option names accepted)."""
        if not isinstance(self._style, StyleChecker):
            raise ConfigurationError("The configured style analyzer does not accept settings")
        self._style.configure(settings)

    def add_dictionary(
        self,
        wordlist_source: str | Path,
        affix_source: str | Path | None = None,
        name: str | None = None,
    ) -> Dictionary:
        """
        Load a dictionary into the spelling engine.

        Without ``affix_source`` the file is a flat list of words.

        Raises:
            DictionaryLoadError: If the dictionary cannot be loaded
        """
        if not isinstance(self._engine, DictionaryEngine):
            raise ConfigurationError("The configured spell checker does not accept dictionaries")
        return self._engine.add_dictionary(wordlist_source, affix_source, name=name)

    def _ensure_configured(self) -> None:
        if self._whitelist is None:
            raise ConfigurationError("Whitelist has to be set.")
        if isinstance(self._engine, DictionaryEngine) and not len(self._engine):
            raise ConfigurationError("At least one dictionary has to be added.")

    # Analysis

    def check_spelling(self, text: str) -> list[SpellingSuggestion]:
        """Spelling suggestions for every rejected word in ``text``."""
        suggestions = []
        wordchars = getattr(self._engine, "wordchars", "")
        for word, offset in tokenize(text, wordchars):
            if not self._engine.check(word):
                suggestions.append(
                    SpellingSuggestion(
                        word=word,
                        suggestions=tuple(self._engine.suggest(word)),
                        offset=offset,
                    )
                )
        return suggestions

    def check_style(self, text: str) -> list[StyleSuggestion]:
        """Style suggestions for ``text``."""
        return self._style.analyze(text)

    async def _analyze_unit(self, unit: TextUnit) -> ProofreadResult:
        try:
            spelling, style = await asyncio.gather(
                self._pool.run(self.check_spelling, unit.text),
                self._pool.run(self.check_style, unit.text),
            )
        except Exception as e:
            error = UnitAnalysisError(unit.index, e)
            logger.warning(str(error))
            return ProofreadResult(text=unit.text, index=unit.index, error=str(e) or e.__class__.__name__)

        return ProofreadResult(
            text=unit.text,
            index=unit.index,
            spelling=tuple(spelling),
            write_good=tuple(style),
        )

    async def proofread(self, html: str) -> list[ProofreadResult]:
        """
        Proofread an HTML document.

        Args:
            html: HTML document or fragment

        Returns:
            One result per text unit, in document order. A unit whose
            analysis failed is returned with ``error`` set and no
            suggestions.

        Raises:
            ConfigurationError: If no whitelist or no dictionary is configured
        """
        self._ensure_configured()

        units = await self._pool.run(
            self._extractor.extract, html, self._whitelist, self._blacklist
        )
        results = await asyncio.gather(*(self._analyze_unit(unit) for unit in units))

        flagged = sum(1 for r in results if not r.is_clean)
        logger.debug(f"Proofread {len(results)} units, {flagged} with suggestions")
        return list(results)

    def proofread_blocking(self, html: str) -> list[ProofreadResult]:
        """Synchronous wrapper around ``proofread``."""
        return asyncio.run(self.proofread(html))

    async def proofread_source(self, source: Source) -> FileResult:
        """Normalize a loaded source to HTML and proofread it."""
        html = self._normalizer.normalize(source.path, source.content, source.media_type)
        return FileResult(file=source.path, results=await self.proofread(html))

    async def proofread_sources(self, sources: Sequence[Source]) -> list[FileResult]:
        """
        Proofread several sources concurrently.

        Sources that failed to load are skipped; the caller reports them.
        Results follow the order of ``sources``.
        """
        self._ensure_configured()

        loaded = []
        for source in sources:
            if source.error is not None:
                logger.info(f"Skipping {source.path}: {source.error}")
            else:
                loaded.append(source)

        return list(await asyncio.gather(*(self.proofread_source(s) for s in loaded)))

    # Lifecycle

    def close(self) -> None:
        """Release the thread pool."""
        self._pool.shutdown(wait=True)

    async def __aenter__(self) -> Proofreader:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __enter__(self) -> Proofreader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
