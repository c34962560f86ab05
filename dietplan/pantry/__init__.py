"""Pantry stock tracking and quantity arithmetic."""

from .inventory import ItemToggle, Pantry, ToggleOutcome, set_item_used, toggle_meal_item
from .quantity import format_quantity, is_depleted, parse_quantity, subtract_quantity

__all__ = [
    "Pantry",
    "ItemToggle",
    "ToggleOutcome",
    "set_item_used",
    "toggle_meal_item",
    "parse_quantity",
    "format_quantity",
    "subtract_quantity",
    "is_depleted",
]
