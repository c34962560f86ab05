"""Ingredient name extraction and singular aggregation keys.

Both are string heuristics tuned to Italian food vocabulary; the tables they
read live in :mod:`dietplan.vocabulary`.
"""

from __future__ import annotations

import re
from functools import lru_cache

from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary

_PARENTHESES = re.compile(r"\(.*?\)")
_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=8)
def _quantity_prefix(units: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(u) for u in units)
    return re.compile(rf"^\d[\d\s.,/-]*(?:(?:{alternatives})\b)?\s*(?:di\b)?\s*")


@lru_cache(maxsize=8)
def _article_pattern(articles: tuple[str, ...]) -> re.Pattern[str]:
    words = [re.escape(a) for a in articles if not a.endswith("'")]
    elisions = [re.escape(a) for a in articles if a.endswith("'")]
    parts = [rf"\b(?:{'|'.join(words)})\b"]
    if elisions:
        parts.append(rf"\b(?:{'|'.join(elisions)})")
    return re.compile("|".join(parts))


def extract_ingredient_name(
    description: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> str:
    """Extract a clean display name from a free-text ingredient description.

    ``"1 vasetto di yogurt di soia (da 125g)"`` -> ``"Yogurt soia"``.

    Falls back to the unmodified description when nothing is left.
    """
    name = description.lower()
    name = _quantity_prefix(vocabulary.quantity_units).sub("", name, count=1)
    name = _PARENTHESES.sub("", name)
    name = _article_pattern(vocabulary.articles).sub("", name)
    name = _WHITESPACE.sub(" ", name).strip()

    if not name:
        return description
    return name[0].upper() + name[1:]


def singularize_word(word: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    if word in vocabulary.unit_tokens:
        return word
    if word in vocabulary.singular_exceptions:
        return vocabulary.singular_exceptions[word]
    if word in vocabulary.singular_passthrough:
        return word
    if len(word) > 3 and word.endswith("i"):
        return word[:-1] + "o"
    if len(word) > 3 and word.endswith("e"):
        return word[:-1] + "a"
    return word


def singularize(name: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Return the aggregation key of an ingredient name.

    Each word is reduced to a singular-looking form so that "Mele rosse"
    and "mela rossa" share the key ``"mela rossa"``.
    """
    if not isinstance(name, str):
        raise TypeError(f"ingredient name must be a str, got {type(name).__name__}")
    words = name.lower().split()
    return " ".join(singularize_word(w, vocabulary) for w in words)
