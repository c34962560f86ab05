"""Data models for parsed diet plans, shopping lists and the pantry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MealItem:
    """One ingredient entry of a meal."""

    ingredient_name: str   # Normalized display name, never empty
    full_description: str  # Original text, verbatim
    used: bool = False

    def to_dict(self) -> dict:
        return {
            "ingredientName": self.ingredient_name,
            "fullDescription": self.full_description,
            "used": self.used,
        }


@dataclass
class Meal:
    name: str  # COLAZIONE | SPUNTINO | PRANZO | MERENDA | CENA
    time: str  # "HH:MM"
    title: str | None = None
    items: list[MealItem] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.items and not self.title

    def to_dict(self) -> dict:
        data: dict = {
            "name": self.name,
            "items": [i.to_dict() for i in self.items],
            "time": self.time,
        }
        if self.title:
            data["title"] = self.title
        return data


@dataclass
class DayPlan:
    day: str  # LUNEDI ... DOMENICA
    meals: list[Meal] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"day": self.day, "meals": [m.to_dict() for m in self.meals]}


@dataclass
class ShoppingListItem:
    """A shopping list line.

    ``quantity`` is the human-readable text shown to the user.  The structured
    ``quantity_value`` / ``quantity_unit`` pair is filled in by pantry
    bookkeeping and left empty by the aggregator.
    """

    item: str
    quantity: str = ""
    quantity_value: float | None = None
    quantity_unit: str = ""

    def to_dict(self) -> dict:
        data: dict = {"item": self.item, "quantity": self.quantity}
        if self.quantity_value is not None:
            data["quantityValue"] = self.quantity_value
            data["quantityUnit"] = self.quantity_unit
        return data


@dataclass
class ShoppingListCategory:
    category: str
    items: list[ShoppingListItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass
class MealPlanData:
    """Output of one offline parse: the weekly plan and its shopping list."""

    weekly_plan: list[DayPlan] = field(default_factory=list)
    shopping_list: list[ShoppingListCategory] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "weeklyPlan": [d.to_dict() for d in self.weekly_plan],
            "shoppingList": [c.to_dict() for c in self.shopping_list],
        }

    def display(self) -> str:
        """Format the plan and shopping list for terminal display."""
        lines: list[str] = []

        for day in self.weekly_plan:
            lines.append(f"{'─' * 50}")
            lines.append(f"📅 {day.day}")
            for meal in day.meals:
                lines.append("")
                title = f" · {meal.title}" if meal.title else ""
                lines.append(f"  🍽  {meal.time} {meal.name}{title}")
                for item in meal.items:
                    mark = "✓" if item.used else "-"
                    lines.append(
                        f"    {mark} {item.ingredient_name:<24} {item.full_description}"
                    )
            lines.append("")

        if self.shopping_list:
            lines.append(f"{'─' * 50}")
            lines.append("🛒 Lista della spesa")
            for category in self.shopping_list:
                lines.append("")
                lines.append(f"  [{category.category}]")
                for item in category.items:
                    lines.append(f"    {item.item:<24} {item.quantity}")
            lines.append("")

        return "\n".join(lines)


@dataclass(frozen=True)
class ParsedQuantity:
    value: float
    unit: str


@dataclass
class PantryItem:
    """A stocked ingredient, depleted as meal items are marked used."""

    item: str
    quantity_value: float | None
    quantity_unit: str
    original_category: str
    original_quantity_value: float | None = None
    original_quantity_unit: str = ""
    expiry_date: str | None = None         # ISO date
    low_stock_threshold: str | None = None  # Free-text quantity, e.g. "100g"
