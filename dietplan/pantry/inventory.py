"""In-memory pantry bookkeeping driven by meal-item consumption toggles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date

from ..models import (
    MealItem,
    PantryItem,
    ParsedQuantity,
    ShoppingListCategory,
    ShoppingListItem,
)
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .quantity import format_quantity, is_depleted, parse_quantity, subtract_quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemToggle:
    """A meal item changed its ``used`` flag.

    Only :func:`set_item_used` / :func:`toggle_meal_item` create these, once
    per real state change, so each event must be applied exactly once.
    """

    ingredient_name: str
    description: str
    used: bool


@dataclass(frozen=True)
class ToggleOutcome:
    item: str
    new_value: float | None
    depleted: bool


def set_item_used(meal_item: MealItem, used: bool) -> ItemToggle | None:
    """Set the flag; returns None when it already had that value."""
    if meal_item.used == used:
        return None
    meal_item.used = used
    return ItemToggle(
        ingredient_name=meal_item.ingredient_name,
        description=meal_item.full_description,
        used=used,
    )


def toggle_meal_item(meal_item: MealItem) -> ItemToggle:
    meal_item.used = not meal_item.used
    return ItemToggle(
        ingredient_name=meal_item.ingredient_name,
        description=meal_item.full_description,
        used=meal_item.used,
    )


class Pantry:
    """Tracks stocked ingredients and their remaining quantities."""

    def __init__(
        self,
        items: list[PantryItem] | None = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
        expiring_days: int = 7,
    ) -> None:
        self._items: list[PantryItem] = list(items or [])
        self._vocabulary = vocabulary
        self._expiring_days = expiring_days

    @property
    def items(self) -> list[PantryItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def find(self, name: str) -> PantryItem | None:
        """Case-insensitive exact lookup by item name."""
        wanted = name.strip().lower()
        for entry in self._items:
            if entry.item.strip().lower() == wanted:
                return entry
        return None

    def add_item(
        self,
        item: str,
        quantity_value: float | None,
        quantity_unit: str,
        category: str,
    ) -> PantryItem:
        """Stock an item, or replace the current amount of an existing one."""
        existing = self.find(item)
        if existing is not None:
            existing.quantity_value = quantity_value
            existing.quantity_unit = quantity_unit
            return existing

        entry = PantryItem(
            item=item,
            quantity_value=quantity_value,
            quantity_unit=quantity_unit,
            original_category=category,
            original_quantity_value=quantity_value,
            original_quantity_unit=quantity_unit,
        )
        self._items.append(entry)
        logger.info("Pantry: added %s (%s)", item, category)
        return entry

    def update_item(self, item: str, **changes) -> PantryItem:
        """Apply a partial update to an existing entry.

        Raises:
            KeyError: If the item is not in the pantry.
        """
        existing = self.find(item)
        if existing is None:
            raise KeyError(item)
        updated = replace(existing, **changes)
        self._items[self._items.index(existing)] = updated
        return updated

    def remove_item(self, item: str) -> PantryItem | None:
        existing = self.find(item)
        if existing is not None:
            self._items.remove(existing)
        return existing

    def move_from_shopping_list(
        self,
        shopping_list: list[ShoppingListCategory],
        category: str,
        item: ShoppingListItem,
    ) -> PantryItem:
        """Mark a shopping list item as bought and stock it."""
        for cat in shopping_list:
            if cat.category == category:
                cat.items = [i for i in cat.items if i.item != item.item]
                break

        value, unit = item.quantity_value, item.quantity_unit
        if value is None and item.quantity and ", " not in item.quantity:
            parsed = parse_quantity(item.quantity, self._vocabulary)
            if parsed is not None:
                value, unit = parsed.value, parsed.unit
        return self.add_item(item.item, value, unit, category)

    def move_to_shopping_list(
        self,
        shopping_list: list[ShoppingListCategory],
        item: str,
    ) -> ShoppingListItem | None:
        """Put a pantry entry back on the shopping list with its original amount."""
        entry = self.remove_item(item)
        if entry is None:
            return None

        category = entry.original_category or self._vocabulary.fallback_category
        target = next((c for c in shopping_list if c.category == category), None)
        if target is None:
            target = ShoppingListCategory(category=category)
            shopping_list.append(target)

        value = (
            entry.original_quantity_value
            if entry.original_quantity_value is not None
            else entry.quantity_value
        )
        unit = entry.original_quantity_unit or entry.quantity_unit
        restored = ShoppingListItem(
            item=entry.item,
            quantity=self._describe(value, unit),
            quantity_value=value,
            quantity_unit=unit,
        )
        target.items.append(restored)
        logger.info("Pantry: %s moved back to the shopping list", entry.item)
        return restored

    def apply_toggle(
        self,
        event: ItemToggle,
        shopping_list: list[ShoppingListCategory] | None = None,
    ) -> ToggleOutcome | None:
        """Deplete or restore the stock of the toggled ingredient.

        A depleted entry is migrated to ``shopping_list`` when one is given.
        Returns None when the ingredient is not stocked.
        """
        entry = self.find(event.ingredient_name)
        if entry is None:
            return None

        reverse = not event.used
        new_value = subtract_quantity(
            entry.quantity_value, event.description, reverse, self._vocabulary
        )
        entry.quantity_value = new_value
        depleted = is_depleted(new_value, reverse)
        if depleted:
            logger.info("Pantry: %s depleted", entry.item)
            if shopping_list is not None:
                self.move_to_shopping_list(shopping_list, entry.item)
        return ToggleOutcome(item=entry.item, new_value=new_value, depleted=depleted)

    def _describe(self, value: float | None, unit: str) -> str:
        if value is None:
            return unit
        unit = unit or self._vocabulary.generic_unit
        return format_quantity(ParsedQuantity(value, unit), self._vocabulary)

    def low_stock_items(self) -> list[PantryItem]:
        result: list[PantryItem] = []
        for entry in self._items:
            if not entry.low_stock_threshold or entry.quantity_value is None:
                continue
            threshold = parse_quantity(entry.low_stock_threshold, self._vocabulary)
            if threshold is not None and entry.quantity_value <= threshold.value:
                result.append(entry)
        return result

    def expiring_soon_items(
        self, today: date | None = None, days: int | None = None
    ) -> list[PantryItem]:
        today = today or date.today()
        if days is None:
            days = self._expiring_days
        result: list[PantryItem] = []
        for entry, expiry in self._with_expiry():
            remaining = (expiry - today).days
            if 0 <= remaining <= days:
                result.append(entry)
        return result

    def expired_items(self, today: date | None = None) -> list[PantryItem]:
        today = today or date.today()
        return [entry for entry, expiry in self._with_expiry() if expiry < today]

    def _with_expiry(self) -> list[tuple[PantryItem, date]]:
        pairs: list[tuple[PantryItem, date]] = []
        for entry in self._items:
            if not entry.expiry_date:
                continue
            try:
                pairs.append((entry, date.fromisoformat(entry.expiry_date)))
            except ValueError:
                logger.warning(
                    "Pantry: ignoring bad expiry date %r for %s",
                    entry.expiry_date,
                    entry.item,
                )
        return pairs

