"""Selector-driven text extraction from HTML."""

import logging
from typing import Optional, Union

import soupsieve
from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from ..errors import ConfigurationError
from ..models.config import SelectorConfig
from ..models.results import TextUnit
from .protocols import SelectorMatcher

logger = logging.getLogger(__name__)

# Elements whose content is never human-readable text
SKIP_TAGS = frozenset({"script", "style", "noscript", "template"})

# Code and program output; skipped like a blacklisted region
CODE_TAGS = frozenset({"code", "pre", "kbd", "samp"})

# C0 controls and DEL become whitespace in unit text
CONTROL_CHARS = dict.fromkeys([*range(0x20), 0x7F], " ")

# Elements whose boundaries separate words
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "br", "caption", "dd", "details", "div",
    "dl", "dt", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2", "h3",
    "h4", "h5", "h6", "header", "hr", "img", "li", "main", "nav", "ol", "p", "pre",
    "section", "summary", "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
})


class CssSelectorMatcher:
    """
    SelectorMatcher backed by soupsieve.

    Example:
        matcher = CssSelectorMatcher(["p", ".content li"])
        matcher.matches(tag)
    """

    def __init__(self, selectors: list[str]) -> None:
        """
        Compile the selectors.

        Raises:
            ConfigurationError: If a selector is invalid
        """
        self.selectors = list(selectors)
        self._patterns = []
        for selector in self.selectors:
            try:
                self._patterns.append(soupsieve.compile(selector))
            except (soupsieve.SelectorSyntaxError, ValueError, TypeError) as e:
                raise ConfigurationError(f"Invalid selector {selector!r}: {e}") from e

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def matches(self, element: Tag) -> bool:
        return any(pattern.match(element) for pattern in self._patterns)


class TextExtractor:
    """
    Collects the text of whitelisted regions of an HTML document.

    Each text node belongs to its innermost whitelisted ancestor, so
    nested whitelist matches never produce overlapping units. Text with
    a blacklisted ancestor (or inside script/style or code) is dropped.

    Example:
        extractor = TextExtractor()
        units = extractor.extract(html, SelectorConfig(whitelist=["p"], blacklist=["code"]))
        for unit in units:
            print(unit.index, unit.text)
    """

    def _parse_html(self, html: str) -> BeautifulSoup:
        """Parse HTML leniently; unclosed tags are closed implicitly."""
        try:
            return BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            logger.warning(f"HTML parser rejected markup, retrying without declarations: {e}")
            return BeautifulSoup(html.replace("<!", "&lt;!"), "html.parser")

    def extract(
        self,
        html: str,
        selectors: Union[SelectorConfig, SelectorMatcher],
        blacklist: Optional[SelectorMatcher] = None,
    ) -> list[TextUnit]:
        """
        Extract ordered text units.

        Args:
            html: HTML document or fragment
            selectors: Selector configuration, or a compiled whitelist matcher
            blacklist: Compiled blacklist matcher (when passing a matcher)

        Returns:
            Text units in document order

        Raises:
            ConfigurationError: If the whitelist is empty or a selector is invalid
        """
        if isinstance(selectors, SelectorConfig):
            whitelist: SelectorMatcher = CssSelectorMatcher(selectors.whitelist)
            blacklist = CssSelectorMatcher(selectors.blacklist)
        else:
            whitelist = selectors

        if isinstance(whitelist, CssSelectorMatcher) and not whitelist:
            raise ConfigurationError("Whitelist has to be set.")

        soup = self._parse_html(html)
        units = self._collect(soup, whitelist, blacklist)
        logger.debug(f"Extracted {len(units)} text units")
        return units

    def _collect(
        self,
        soup: BeautifulSoup,
        whitelist: SelectorMatcher,
        blacklist: Optional[SelectorMatcher],
    ) -> list[TextUnit]:
        owners: list[Tag] = []
        pieces: list[list[str]] = []

        # None entries close a block element: a separator for its owner
        stack: list[tuple[Optional[PageElement], Optional[int]]] = [
            (child, None) for child in reversed(soup.contents)
        ]

        while stack:
            node, owner = stack.pop()

            if node is None:
                if owner is not None:
                    pieces[owner].append(" ")
                continue

            if isinstance(node, NavigableString):
                if owner is not None and not isinstance(node, PreformattedString):
                    pieces[owner].append(str(node))
                continue

            if not isinstance(node, Tag) or node.name in SKIP_TAGS:
                continue

            if node.name in CODE_TAGS or (blacklist is not None and blacklist.matches(node)):
                if owner is not None:
                    pieces[owner].append(" ")
                continue

            if whitelist.matches(node):
                if owner is not None:
                    pieces[owner].append(" ")
                owners.append(node)
                pieces.append([])
                owner = len(owners) - 1
            elif owner is not None and node.name in BLOCK_TAGS:
                pieces[owner].append(" ")
                stack.append((None, owner))

            stack.extend((child, owner) for child in reversed(node.contents))

        units = []
        for element, parts in zip(owners, pieces):
            text = " ".join("".join(parts).translate(CONTROL_CHARS).split())
            if text:
                units.append(TextUnit(index=len(units), text=text, element=element))
        return units
