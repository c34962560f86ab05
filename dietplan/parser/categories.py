"""Keyword-based shopping categories for ingredient names."""

from __future__ import annotations

from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary


def categorize(name: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> str:
    """Guess the shopping category of an ingredient from its name.

    Buckets are tried in order and the first keyword hit wins, unless the
    name also holds one of the bucket's exclusions.  Unknown
    names (and the empty string) fall back to ``vocabulary.fallback_category``.
    """
    if not isinstance(name, str):
        raise TypeError(f"ingredient name must be a str, got {type(name).__name__}")
    lower = name.lower()
    for category, keywords in vocabulary.category_keywords:
        excluded = vocabulary.category_exclusions.get(category, ())
        if any(word in lower for word in excluded):
            continue
        if any(keyword in lower for keyword in keywords):
            return category
    return vocabulary.fallback_category
