"""Fuzzy name matching between catalog sign names and inventory rows.

A scored linear search: the inventory holds tens of rows, so no index is
kept. Scores add up as follows:

* exact match of the normalized names: 1000, which always wins
* one normalized name contains the other: 50
* each shared keyword: 10

The minimum score equals the substring score, so one or two shared words
never match on their own.
"""

import re
import unicodedata
from collections.abc import Sequence

from transito_quiz.bank.domain.sources import InventoryRow

EXACT_SCORE = 1000
SUBSTRING_SCORE = 50
KEYWORD_SCORE = 10
MIN_SCORE = SUBSTRING_SCORE

_NON_ALNUM = re.compile(r"[^0-9a-z\s]+")
_WHITESPACE = re.compile(r"\s+")

_STOPWORDS = frozenset(
    {
        "del",
        "las",
        "los",
        "una",
        "uno",
        "por",
        "para",
        "con",
        "sin",
        "que",
        "senal",
    }
)


def normalize_name(name: str) -> str:
    """Casefold, strip accents and punctuation, collapse whitespace."""
    decomposed = unicodedata.normalize("NFKD", name.casefold())
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    cleaned = _NON_ALNUM.sub(" ", ascii_only)
    return _WHITESPACE.sub(" ", cleaned).strip()


def keywords(name: str) -> set[str]:
    return {
        token
        for token in normalize_name(name).split()
        if len(token) >= 3 and token not in _STOPWORDS
    }


def match_score(query: str, candidate: str) -> int:
    left = normalize_name(query)
    right = normalize_name(candidate)
    if not left or not right:
        return 0
    if left == right:
        return EXACT_SCORE

    score = 0
    if left in right or right in left:
        score += SUBSTRING_SCORE
    score += KEYWORD_SCORE * len(keywords(query) & keywords(candidate))
    return score


def best_inventory_match(
    name: str,
    inventory: Sequence[InventoryRow],
    min_score: int = MIN_SCORE,
) -> InventoryRow | None:
    """
    Return the best-scoring inventory row for name, or None below min_score.

    Ties keep the first row seen.
    """
    best: InventoryRow | None = None
    best_score = min_score - 1
    for row in inventory:
        score = match_score(name, row.name)
        if score > best_score:
            best, best_score = row, score
            if score == EXACT_SCORE:
                break
    return best
