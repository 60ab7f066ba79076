"""Hunspell affix file (.aff) parsing."""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from ..errors import DictionaryLoadError

logger = logging.getLogger(__name__)

# Directives naming a single flag with special meaning
FLAG_DIRECTIVES = {
    "KEEPCASE": "keepcase",
    "NOSUGGEST": "nosuggest",
    "FORBIDDENWORD": "forbidden",
    "NEEDAFFIX": "needaffix",
    "ONLYINCOMPOUND": "onlyincompound",
}

DEFAULT_TRY = "esianrtolcdugmphbyfvkwzxjqESIANRTOLCDUGMPHBYFVKWZXJQ'"


def _condition_pattern(condition: str, suffix: bool) -> Optional[re.Pattern[str]]:
    """Translate a Hunspell affix condition into an anchored regex."""
    if condition in ("", "."):
        return None

    parts = []
    in_class = False
    for char in condition:
        if in_class:
            if char == "]":
                in_class = False
                parts.append("]")
            elif char == "\\":
                parts.append("\\\\")
            else:
                parts.append(char)
        elif char == "[":
            in_class = True
            parts.append("[")
        elif char == ".":
            parts.append(".")
        else:
            parts.append(re.escape(char))

    if in_class:
        raise ValueError(f"Unterminated character class in condition {condition!r}")

    body = "".join(parts)
    return re.compile(body + "$" if suffix else "^" + body)


@dataclass(frozen=True)
class AffixEntry:
    """
    One PFX or SFX rule line.

    Attributes:
        flag: Flag that enables this rule on a stem
        suffix: True for SFX, False for PFX
        cross_product: Whether the rule combines with rules of the other kind
        strip: Characters removed from the stem before adding
        add: Characters added to the stem
        continuation: Flags the derived form carries (twofold affixes)
    """

    flag: str
    suffix: bool
    cross_product: bool
    strip: str
    add: str
    condition: Optional[re.Pattern[str]] = field(default=None, compare=False)
    continuation: tuple[str, ...] = ()

    def apply(self, word: str) -> Optional[str]:
        """Derive a word form, or None if the rule does not apply to ``word``."""
        if self.condition is not None and not self.condition.search(word):
            return None

        if self.suffix:
            if self.strip:
                if not word.endswith(self.strip) or len(word) <= len(self.strip):
                    return None
                word = word[: -len(self.strip)]
            return word + self.add

        if self.strip:
            if not word.startswith(self.strip) or len(word) <= len(self.strip):
                return None
            word = word[len(self.strip) :]
        return self.add + word


@dataclass
class AffixFile:
    """
    Parsed contents of a Hunspell .aff file.

    Only the directives needed for checking and suggesting are kept;
    anything else (morphology, ICONV/OCONV, compounding beyond
    COMPOUNDRULE) is ignored.
    """

    encoding: str = "UTF-8"
    flag_mode: str = "char"
    try_chars: str = DEFAULT_TRY
    wordchars: str = ""
    rep: list[tuple[str, str]] = field(default_factory=list)
    prefixes: dict[str, list[AffixEntry]] = field(default_factory=dict)
    suffixes: dict[str, list[AffixEntry]] = field(default_factory=dict)
    compound_rules: list[tuple[str, ...]] = field(default_factory=list)
    compound_min: int = 3

    keepcase: Optional[str] = None
    nosuggest: Optional[str] = None
    forbidden: Optional[str] = None
    needaffix: Optional[str] = None
    onlyincompound: Optional[str] = None

    def parse_flags(self, value: str) -> tuple[str, ...]:
        """Split a flag field according to the FLAG mode."""
        if not value:
            return ()
        if self.flag_mode == "long":
            return tuple(value[i : i + 2] for i in range(0, len(value), 2))
        if self.flag_mode == "num":
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return tuple(value)

    def parse_compound_rule(self, rule: str) -> tuple[str, ...]:
        """Tokenize a COMPOUNDRULE into flags and the '*' / '?' operators."""
        tokens: list[str] = []
        i = 0
        while i < len(rule):
            char = rule[i]
            if char in "*?":
                tokens.append(char)
                i += 1
            elif char == "(":
                end = rule.find(")", i)
                if end == -1:
                    raise ValueError(f"Unbalanced parenthesis in COMPOUNDRULE {rule!r}")
                tokens.append(rule[i + 1 : end])
                i = end + 1
            elif self.flag_mode == "long":
                tokens.append(rule[i : i + 2])
                i += 2
            else:
                tokens.append(char)
                i += 1
        return tuple(tokens)

    @property
    def compound_flags(self) -> set[str]:
        return {t for rule in self.compound_rules for t in rule if t not in ("*", "?")}

    @classmethod
    def parse(cls, text: str, source: str = "<affix>") -> "AffixFile":
        """
        Parse .aff text.

        Raises:
            DictionaryLoadError: On malformed affix headers or rules
        """
        aff = cls()
        lines = [line.strip() for line in text.splitlines()]
        i = 0

        def fail(lineno: int, message: str) -> DictionaryLoadError:
            return DictionaryLoadError(f"{source}:{lineno + 1}: {message}", source=source)

        while i < len(lines):
            line = lines[i]
            i += 1
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            directive = parts[0]

            if directive in ("PFX", "SFX"):
                if len(parts) < 4:
                    raise fail(i - 1, f"Malformed {directive} header: {line!r}")
                flag, cross, count_str = parts[1], parts[2], parts[3]
                try:
                    count = int(count_str)
                except ValueError:
                    raise fail(i - 1, f"Invalid rule count in {directive} header: {line!r}") from None

                suffix = directive == "SFX"
                table = aff.suffixes if suffix else aff.prefixes
                entries = table.setdefault(flag, [])

                for _ in range(count):
                    while i < len(lines) and (not lines[i] or lines[i].startswith("#")):
                        i += 1
                    if i >= len(lines):
                        raise fail(i - 1, f"{directive} {flag} declares {count} rules but file ended")
                    rule = lines[i].split()
                    if len(rule) < 4 or rule[0] != directive or rule[1] != flag:
                        raise fail(i, f"Malformed {directive} rule: {lines[i]!r}")
                    i += 1

                    strip = "" if rule[2] == "0" else rule[2]
                    add, _, cont = rule[3].partition("/")
                    if add == "0":
                        add = ""
                    condition = rule[4] if len(rule) > 4 else "."
                    try:
                        pattern = _condition_pattern(condition, suffix)
                    except (ValueError, re.error) as e:
                        raise fail(i - 1, str(e)) from e

                    entries.append(
                        AffixEntry(
                            flag=flag,
                            suffix=suffix,
                            cross_product=cross == "Y",
                            strip=strip,
                            add=add,
                            condition=pattern,
                            continuation=aff.parse_flags(cont),
                        )
                    )

            elif directive == "REP":
                if len(parts) >= 3:
                    aff.rep.append((parts[1].replace("_", " "), parts[2].replace("_", " ")))

            elif directive == "COMPOUNDRULE":
                # The first COMPOUNDRULE line only carries the count
                if len(parts) >= 2 and not parts[1].isdigit():
                    try:
                        aff.compound_rules.append(aff.parse_compound_rule(parts[1]))
                    except ValueError as e:
                        raise fail(i - 1, str(e)) from e

            elif directive == "FLAG" and len(parts) >= 2:
                mode = parts[1]
                aff.flag_mode = {"long": "long", "num": "num"}.get(mode, "char")

            elif directive == "SET" and len(parts) >= 2:
                aff.encoding = parts[1]

            elif directive == "TRY" and len(parts) >= 2:
                aff.try_chars = parts[1]

            elif directive == "WORDCHARS" and len(parts) >= 2:
                aff.wordchars = parts[1]

            elif directive == "COMPOUNDMIN" and len(parts) >= 2:
                try:
                    aff.compound_min = max(1, int(parts[1]))
                except ValueError:
                    raise fail(i - 1, f"Invalid COMPOUNDMIN: {line!r}") from None

            elif directive in FLAG_DIRECTIVES and len(parts) >= 2:
                setattr(aff, FLAG_DIRECTIVES[directive], parts[1])

        logger.debug(
            f"Parsed {source}: {sum(len(v) for v in aff.prefixes.values())} prefix rules, "
            f"{sum(len(v) for v in aff.suffixes.values())} suffix rules"
        )
        return aff


def detect_encoding(raw: bytes) -> str:
    """Find the SET directive in raw .aff bytes (defaults to UTF-8)."""
    match = re.search(rb"^\s*SET\s+(\S+)", raw, re.MULTILINE)
    if not match:
        return "utf-8"
    encoding = match.group(1).decode("ascii", errors="ignore")
    # Hunspell spells ISO-8859-x as ISO8859-x
    return re.sub(r"(?i)^ISO8859", "ISO-8859", encoding)
