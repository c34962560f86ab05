"""Shopping list aggregation over a parsed weekly plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..models import DayPlan, ShoppingListCategory, ShoppingListItem
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .categories import categorize
from .ingredients import singularize

logger = logging.getLogger(__name__)

QUANTITY_SEPARATOR = ", "


@dataclass
class _Aggregate:
    display_name: str
    category: str
    descriptions: list[str] = field(default_factory=list)


def generate_shopping_list(
    plan: list[DayPlan],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[ShoppingListCategory]:
    """Build a categorized shopping list from every meal item of the plan.

    Items sharing a singular key are merged.  Quantities are not summed:
    free-text amounts mix units, ranges and qualifiers, so the merged entry
    lists every contributing description instead.
    """
    aggregated: dict[str, _Aggregate] = {}

    for day in plan:
        for meal in day.meals:
            for item in meal.items:
                key = singularize(item.ingredient_name, vocabulary)
                entry = aggregated.get(key)
                if entry is None:
                    entry = _Aggregate(
                        display_name=item.ingredient_name,
                        category=categorize(item.ingredient_name, vocabulary),
                    )
                    aggregated[key] = entry
                entry.descriptions.append(item.full_description)

    by_category: dict[str, list[ShoppingListItem]] = {}
    for entry in aggregated.values():
        by_category.setdefault(entry.category, []).append(
            ShoppingListItem(
                item=_capitalize(entry.display_name),
                quantity=QUANTITY_SEPARATOR.join(entry.descriptions),
            )
        )

    logger.debug(
        "Shopping list: %d items in %d categories",
        len(aggregated),
        len(by_category),
    )
    return [
        ShoppingListCategory(category=category, items=items)
        for category, items in sorted(by_category.items())
    ]


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]
