"""Word tokenization for spell checking."""

import functools
import re
from collections.abc import Iterator

# Runs of letters, optionally joined by apostrophes ("don't", "O'Brien").
# Digits, underscores, hyphens and other punctuation end a word unless
# the dictionary declares them as WORDCHARS.
LETTER = r"[^\W\d_]"

WORD_PATTERN = re.compile(rf"{LETTER}+(?:['’]{LETTER}+)*")

APOSTROPHES = str.maketrans({"’": "'", "ʼ": "'"})


@functools.lru_cache(maxsize=32)
def word_pattern(wordchars: str = "") -> re.Pattern[str]:
    """
    Token pattern for letters plus the extra ``wordchars``.

    With ``WORDCHARS 0123456789`` an ordinal such as "21st" stays one
    token instead of splitting into "21" and "st".
    """
    extra = "".join(re.escape(c) for c in sorted(set(wordchars)) if not c.isalpha() and not c.isspace())
    if not extra:
        return WORD_PATTERN
    unit = rf"(?:{LETTER}|[{extra}])"
    return re.compile(rf"{unit}+(?:['’]{unit}+)*")


def tokenize(text: str, wordchars: str = "") -> Iterator[tuple[str, int]]:
    """
    Yield (word, offset) pairs for every word in ``text``.

    Curly apostrophes are normalized to ASCII; offsets refer to the
    original text. Apostrophes, hyphens and dots declared as word
    characters are trimmed from both ends of a token, and tokens without
    a letter, such as plain numbers, are skipped.
    """
    for match in word_pattern(wordchars).finditer(text):
        word = match.group(0)
        start = match.start()

        stripped = word.lstrip("'’ʼ-.")
        start += len(word) - len(stripped)
        word = stripped.rstrip("'’ʼ-.")

        if not any(c.isalpha() for c in word):
            continue
        yield word.translate(APOSTROPHES), start
