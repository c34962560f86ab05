"""Day / meal segmentation of the cleaned line stream.

The segmenter only groups lines.  Whether a line is a meal title or an
ingredient depends on the whole block, so classification happens later in
:mod:`dietplan.parser.blocks`.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field

from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary


@dataclass
class RawMealBlock:
    """Lines collected under one meal keyword, not yet classified."""

    meal_name: str
    content_lines: list[str] = field(default_factory=list)


@dataclass
class RawDay:
    day: str
    blocks: list[RawMealBlock] = field(default_factory=list)


def fold_keyword_text(text: str) -> str:
    """Upper-case and strip accents so "Lunedì" matches "LUNEDI"."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.upper()


def _find_keyword(folded_line: str, keywords: tuple[str, ...]) -> str | None:
    for keyword in keywords:
        if fold_keyword_text(keyword) in folded_line:
            return keyword
    return None


def segment_days(
    lines: list[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[RawDay]:
    """Walk the lines and group them into days and meal blocks.

    Lines before the first day keyword are ignored.  Inside a day, a meal
    keyword opens a new block and any other line is appended to the last
    open block (or dropped when there is none).
    """
    days: list[RawDay] = []
    current: RawDay | None = None

    for line in lines:
        folded = fold_keyword_text(line)

        day_keyword = _find_keyword(folded, vocabulary.day_keywords)
        if day_keyword is not None:
            current = RawDay(day=day_keyword)
            days.append(current)
            continue

        if current is None:
            continue

        meal_keyword = _find_keyword(folded, vocabulary.meal_keywords)
        if meal_keyword is not None:
            current.blocks.append(RawMealBlock(meal_name=meal_keyword))
            continue

        if current.blocks:
            current.blocks[-1].content_lines.append(line)

    return days
