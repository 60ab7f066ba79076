"""Candidate generation and ranking for spelling suggestions."""

from collections.abc import Iterable, Iterator


def edits1(word: str, alphabet: str) -> Iterator[str]:
    """Yield every string one delete, transpose, replace or insert away from ``word``."""
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    for left, right in splits:
        if right:
            yield left + right[1:]
        if len(right) > 1:
            yield left + right[1] + right[0] + right[2:]
        for char in alphabet:
            if right and char != right[0]:
                yield left + char + right[1:]
            yield left + char + right


def split_pairs(word: str) -> Iterator[tuple[str, str]]:
    """Yield (left, right) for every way of splitting ``word`` into two words."""
    for i in range(1, len(word)):
        yield word[:i], word[i:]


def damerau_distance(a: str, b: str) -> int:
    """Optimal string alignment distance between ``a`` and ``b``."""
    if a == b:
        return 0
    rows = len(a) + 1
    cols = len(b) + 1
    prev_prev: list[int] = []
    prev = list(range(cols))
    for i in range(1, rows):
        current = [i] + [0] * (cols - 1)
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            current[j] = min(
                prev[j] + 1,
                current[j - 1] + 1,
                prev[j - 1] + cost,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                current[j] = min(current[j], prev_prev[j - 2] + 1)
        prev_prev, prev = prev, current
    return prev[-1]


def _bigrams(word: str) -> set[str]:
    padded = f" {word} "
    return {padded[i : i + 2] for i in range(len(padded) - 1)}


def bigram_similarity(a: str, b: str) -> float:
    """Dice coefficient over character bigrams."""
    ga, gb = _bigrams(a), _bigrams(b)
    if not ga or not gb:
        return 0.0
    return 2 * len(ga & gb) / (len(ga) + len(gb))


def common_prefix(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def rank_key(word: str, candidate: str, from_rep: bool) -> tuple:
    """
    Sort key for a candidate; smaller sorts first.

    REP table hits first, then edit distance, then longer shared prefix,
    then bigram similarity, then alphabetical for a stable order.
    """
    lowered = word.lower()
    cand = candidate.lower()
    return (
        0 if from_rep else 1,
        damerau_distance(lowered, cand),
        -common_prefix(lowered, cand),
        -round(bigram_similarity(lowered, cand), 6),
        candidate,
    )


def match_case(word: str, candidate: str) -> str:
    """Reapply the capitalization pattern of ``word`` to ``candidate``."""
    if len(word) > 1 and word.isupper():
        return candidate.upper()
    if word[:1].isupper() and candidate[:1].islower():
        return candidate[:1].upper() + candidate[1:]
    return candidate


def unique(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
