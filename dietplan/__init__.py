"""Offline diet-plan parsing: weekly meals, shopping list and pantry arithmetic."""

from .config import DietPlanConfig, load_config
from .models import (
    DayPlan,
    Meal,
    MealItem,
    MealPlanData,
    PantryItem,
    ParsedQuantity,
    ShoppingListCategory,
    ShoppingListItem,
)
from .pantry import (
    ItemToggle,
    Pantry,
    format_quantity,
    parse_quantity,
    set_item_used,
    subtract_quantity,
    toggle_meal_item,
)
from .parser import OfflineParser, categorize, parse_pdf_text, singularize
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "OfflineParser",
    "parse_pdf_text",
    "categorize",
    "singularize",
    "MealPlanData",
    "DayPlan",
    "Meal",
    "MealItem",
    "ShoppingListCategory",
    "ShoppingListItem",
    "ParsedQuantity",
    "PantryItem",
    "Pantry",
    "ItemToggle",
    "set_item_used",
    "toggle_meal_item",
    "parse_quantity",
    "format_quantity",
    "subtract_quantity",
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    "DietPlanConfig",
    "load_config",
]
