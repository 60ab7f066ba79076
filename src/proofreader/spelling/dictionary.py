"""Spelling dictionaries: Hunspell .dic/.aff pairs and flat word lists."""

import functools
import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Union

from ..errors import DictionaryLoadError
from .affix import AffixEntry, AffixFile, detect_encoding
from .suggest import edits1, match_case, rank_key, split_pairs, unique

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Double edits are only tried for short words; the candidate space grows quadratically
MAX_EDITS2_LENGTH = 6


def _read_bytes(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise DictionaryLoadError(f"Cannot read dictionary {path}: {e}", source=str(path)) from e


def _decode(raw: bytes, encoding: str, source: str) -> str:
    try:
        return raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Cannot decode {source} as {encoding}: {e}", source=source) from e


def _split_entry(line: str) -> tuple[str, str]:
    """Split a .dic line into (word, flags), honouring escaped slashes."""
    # Morphological fields follow a tab or a space
    line = re.split(r"\t| (?=\S+:)", line, maxsplit=1)[0].strip()
    i = 0
    while True:
        i = line.find("/", i)
        if i == -1:
            return line.replace("\\/", "/"), ""
        if i > 0 and line[i - 1] == "\\":
            i += 1
            continue
        if i == 0:
            # A leading slash is part of the word
            i += 1
            continue
        return line[:i].replace("\\/", "/"), line[i + 1 :]


def parse_wordlist(text: str) -> list[tuple[str, str]]:
    """Parse .dic text into (word, raw flags) pairs, skipping the count line."""
    entries = []
    first = True
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if first:
            first = False
            if line.isdigit():
                continue
        word, flags = _split_entry(line)
        if word:
            entries.append((word, flags))
    return entries


class Dictionary:
    """
    An immutable spelling dictionary.

    All word forms reachable through the affix rules are generated when
    the dictionary is built, so ``check`` is a handful of set lookups.

    Example:
        en = Dictionary.from_files("en_US.dic", "en_US.aff")
        en.check("walked")    # True
        en.suggest("wlaked")  # ['walked', ...]
    """

    def __init__(
        self,
        name: str,
        affix: AffixFile,
        entries: list[tuple[str, tuple[str, ...]]],
        suggestion_cache_size: int = 4096,
    ) -> None:
        self.name = name
        self._affix = affix
        self._words: set[str] = set()
        self._forbidden: set[str] = set()
        self._keepcase: set[str] = set()
        self._nosuggest: set[str] = set()
        self._compounds: list[re.Pattern[str]] = []

        compound_flags = affix.compound_flags
        compound_members: dict[str, set[str]] = {flag: set() for flag in compound_flags}

        for word, flags in entries:
            flagset = set(flags)

            for flag in compound_flags & flagset:
                compound_members[flag].add(word)

            forms = set(self._expand(word, flags))
            if affix.forbidden is not None and affix.forbidden in flagset:
                self._forbidden.update(forms)
                continue
            if affix.onlyincompound is not None and affix.onlyincompound in flagset:
                continue

            self._words.update(forms)
            if affix.keepcase is not None and affix.keepcase in flagset:
                self._keepcase.update(forms)
            if affix.nosuggest is not None and affix.nosuggest in flagset:
                self._nosuggest.update(forms)

        for rule in affix.compound_rules:
            pattern = self._compile_compound_rule(rule, compound_members, affix.compound_min)
            if pattern is not None:
                self._compounds.append(pattern)

        # Lowercase TRY characters drive edit generation
        self._alphabet = "".join(unique(c.lower() for c in affix.try_chars))
        self._ranked = functools.lru_cache(maxsize=suggestion_cache_size)(self._compute_ranked)

        logger.debug(f"Dictionary {name}: {len(entries)} entries, {len(self._words)} word forms")

    # Loading

    @classmethod
    def parse(
        cls,
        dic_text: str,
        aff_text: Optional[str] = None,
        name: str = "<memory>",
    ) -> "Dictionary":
        """
        Build a dictionary from already-read text.

        Without ``aff_text`` the word list is flat: every line is a word
        that is accepted exactly as written (plus the usual casing rules).
        """
        if aff_text is None:
            words = parse_wordlist(dic_text)
            letters = unique(c for word, _ in words for c in word.lower() if c.isalpha())
            affix = AffixFile(try_chars="".join(letters) or "abcdefghijklmnopqrstuvwxyz")
            return cls(name, affix, [(word, ()) for word, _ in words])

        affix = AffixFile.parse(aff_text, source=name)
        entries = [(word, affix.parse_flags(flags)) for word, flags in parse_wordlist(dic_text)]
        if not entries:
            logger.warning(f"Dictionary {name} contains no words")
        return cls(name, affix, entries)

    @classmethod
    def from_files(
        cls,
        dic_path: PathLike,
        aff_path: Optional[PathLike] = None,
        name: Optional[str] = None,
    ) -> "Dictionary":
        """
        Load a dictionary from disk.

        Raises:
            DictionaryLoadError: If a file is missing, unreadable or malformed
        """
        dic_path = Path(dic_path)
        name = name or dic_path.stem

        if aff_path is None:
            text = _decode(_read_bytes(dic_path), "utf-8-sig", str(dic_path))
            return cls.parse(text, name=name)

        aff_raw = _read_bytes(aff_path)
        encoding = detect_encoding(aff_raw)
        aff_text = _decode(aff_raw, encoding, str(aff_path))
        dic_text = _decode(_read_bytes(dic_path), encoding, str(dic_path))
        return cls.parse(dic_text, aff_text, name=name)

    # Index construction

    def _expand(self, word: str, flags: tuple[str, ...]) -> Iterator[str]:
        """Yield the stem and every form derived from it by its affix flags."""
        aff = self._affix
        needaffix = aff.needaffix

        if needaffix is None or needaffix not in flags:
            yield word

        for flag in flags:
            for sfx in aff.suffixes.get(flag, ()):
                form = sfx.apply(word)
                if form is None:
                    continue
                yield from self._derived(form, sfx)
                if sfx.cross_product:
                    for pflag in flags:
                        for pfx in aff.prefixes.get(pflag, ()):
                            if pfx.cross_product:
                                combined = pfx.apply(form)
                                if combined is not None:
                                    yield combined

            for pfx in aff.prefixes.get(flag, ()):
                form = pfx.apply(word)
                if form is not None:
                    yield from self._derived(form, pfx)

    def _derived(self, form: str, entry: AffixEntry) -> Iterator[str]:
        """Yield an affixed form plus second-level suffixes from its continuation flags."""
        aff = self._affix
        if aff.needaffix is None or aff.needaffix not in entry.continuation:
            yield form
        for cflag in entry.continuation:
            for sfx in aff.suffixes.get(cflag, ()):
                twofold = sfx.apply(form)
                if twofold is not None:
                    yield twofold

    @staticmethod
    def _compile_compound_rule(
        rule: tuple[str, ...],
        members: dict[str, set[str]],
        min_length: int = 1,
    ) -> Optional[re.Pattern[str]]:
        parts = []
        for token in rule:
            if token in ("*", "?"):
                parts.append(token)
                continue
            # Words shorter than COMPOUNDMIN cannot be part of a compound
            words = sorted(
                (w for w in members.get(token, ()) if len(w) >= min_length),
                key=lambda w: (-len(w), w),
            )
            if not words:
                return None
            parts.append("(?:" + "|".join(re.escape(w) for w in words) + ")")
        return re.compile("".join(parts))

    # Checking

    def _check_exact(self, word: str) -> bool:
        if word in self._forbidden:
            return False
        if word in self._words:
            return True
        return any(pattern.fullmatch(word) for pattern in self._compounds)

    def _check_variant(self, word: str) -> bool:
        return word not in self._keepcase and self._check_exact(word)

    def check(self, word: str) -> bool:
        """
        Whether ``word`` is spelled correctly.

        ALL-CAPS words also match their capitalized and lower-case forms,
        Capitalized words their lower-case form, unless the entry is
        marked KEEPCASE.
        """
        word = word.strip()
        if not word:
            return True
        if self._check_exact(word):
            return True

        if len(word) > 1 and word.isupper():
            capitalized = word[0] + word[1:].lower()
            if self._check_variant(capitalized):
                return True
            if self._check_variant(word.lower()):
                return True

        uncapitalized = word[0].lower() + word[1:]
        if uncapitalized != word:
            if self._check_variant(uncapitalized):
                return True
            lowered = uncapitalized.lower()
            if lowered != uncapitalized and self._check_variant(lowered):
                return True

        return False

    __contains__ = check

    def __len__(self) -> int:
        return len(self._words)

    @property
    def wordchars(self) -> str:
        """Non-letter characters that belong inside words (the WORDCHARS directive)."""
        return self._affix.wordchars

    # Suggestions

    def _suggestable(self, candidate: str) -> bool:
        if " " in candidate:
            return all(self._suggestable(part) for part in candidate.split(" "))
        if candidate in self._nosuggest or candidate.lower() in self._nosuggest:
            return False
        return self.check(candidate)

    def _fast_suggestable(self, candidate: str) -> bool:
        return (
            candidate in self._words
            and candidate not in self._forbidden
            and candidate not in self._nosuggest
        )

    def _compute_ranked(self, word: str) -> tuple[tuple[tuple, str], ...]:
        variants = unique([word, word.lower()])
        found: dict[str, tuple] = {}

        def consider(candidate: str, from_rep: bool = False) -> None:
            if candidate in variants:
                return
            key = rank_key(word, candidate, from_rep)
            if candidate not in found or key < found[candidate]:
                found[candidate] = key

        for base in variants:
            for src, dst in self._affix.rep:
                start = base.find(src)
                while start != -1:
                    candidate = base[:start] + dst + base[start + len(src) :]
                    if self._suggestable(candidate):
                        consider(candidate, from_rep=True)
                    start = base.find(src, start + 1)

            for candidate in set(edits1(base, self._alphabet)):
                if self._suggestable(candidate):
                    consider(candidate)

            for left, right in split_pairs(base):
                if self._suggestable(left) and self._suggestable(right):
                    consider(f"{left} {right}")

        if not found and len(word) <= MAX_EDITS2_LENGTH:
            for base in variants:
                for first in set(edits1(base, self._alphabet)):
                    for candidate in edits1(first, self._alphabet):
                        if self._fast_suggestable(candidate):
                            consider(candidate)

        ranked = sorted((key, match_case(word, candidate)) for candidate, key in found.items())
        return tuple(ranked)

    def ranked_suggestions(self, word: str) -> list[tuple[tuple, str]]:
        """Candidates with their sort keys, best first."""
        word = word.strip()
        if not word:
            return []
        return list(self._ranked(word))

    def suggest(self, word: str, limit: int = 5) -> list[str]:
        """Up to ``limit`` corrections for ``word``, best first."""
        if limit <= 0:
            return []
        return unique(candidate for _, candidate in self.ranked_suggestions(word))[:limit]
