"""Classification of a meal block into an optional title and ingredient items."""

from __future__ import annotations

import re

from ..models import Meal, MealItem
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .ingredients import extract_ingredient_name
from .segmenter import RawMealBlock

# Bullet, asterisk, dash or a leading integer ("150g ...", "2) ...")
_INGREDIENT_START = re.compile(r"^\s*(?:[-*•]|\d+)")

# Only list markers are stripped; "150g" and "1.5 kg" keep their quantity
_MARKER_PREFIX = re.compile(r"^\s*(?:[-*•]+\s*|\d+\)\s*|\d+\.\s+)")


def is_ingredient_line(line: str) -> bool:
    return _INGREDIENT_START.match(line) is not None


def strip_marker(line: str) -> str:
    return _MARKER_PREFIX.sub("", line, count=1).strip()


def split_ingredients(line: str) -> list[str]:
    """Split an ingredient line on ``;`` into cleaned fragments."""
    content = strip_marker(line) or line
    fragments: list[str] = []
    for part in content.split(";"):
        cleaned = strip_marker(part.replace("•", ""))
        if cleaned:
            fragments.append(cleaned)
    return fragments


def process_meal_block(
    block: RawMealBlock,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Meal:
    """Turn a raw block into a :class:`Meal`.

    The first non-ingredient line seen before any ingredient becomes the
    title; later non-ingredient lines are dropped.
    """
    meal = Meal(name=block.meal_name, time=vocabulary.meal_time(block.meal_name))
    ignored = {line.upper() for line in vocabulary.ignored_lines}
    found_ingredients = False

    for line in block.content_lines:
        if line.strip().upper() in ignored:
            continue

        if is_ingredient_line(line):
            found_ingredients = True
            for fragment in split_ingredients(line):
                meal.items.append(
                    MealItem(
                        ingredient_name=extract_ingredient_name(fragment, vocabulary),
                        full_description=fragment,
                    )
                )
        elif meal.title is None and not found_ingredients:
            meal.title = line

    return meal
