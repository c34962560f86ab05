"""Tests for shopping list aggregation."""

from dietplan.models import DayPlan, Meal, MealItem
from dietplan.parser.shopping import generate_shopping_list


def _day(day: str, *items: tuple[str, str]) -> DayPlan:
    meal = Meal(
        name="PRANZO",
        time="13:00",
        items=[MealItem(ingredient_name=n, full_description=d) for n, d in items],
    )
    return DayPlan(day=day, meals=[meal])


class TestGenerateShoppingList:
    def test_singular_and_plural_merged(self):
        plan = [
            _day("LUNEDI", ("Mela", "1 mela")),
            _day("MARTEDI", ("Mele", "2 mele")),
        ]
        result = generate_shopping_list(plan)
        assert len(result) == 1
        assert result[0].category == "Fruit"
        assert len(result[0].items) == 1
        item = result[0].items[0]
        assert item.item == "Mela"
        assert item.quantity == "1 mela, 2 mele"

    def test_category_from_first_seen_name(self):
        plan = [_day("LUNEDI", ("Mele", "2 mele"), ("mela", "1 mela"))]
        item = generate_shopping_list(plan)[0].items[0]
        assert item.item == "Mele"

    def test_categories_sorted(self):
        plan = [
            _day(
                "LUNEDI",
                ("Yogurt greco", "150g yogurt greco"),
                ("Avena", "30g avena"),
                ("Zafferano", "1 bustina zafferano"),
                ("Banana", "1 banana"),
            )
        ]
        result = generate_shopping_list(plan)
        assert [c.category for c in result] == [
            "Carbohydrates & Cereals",
            "Dairy",
            "Fruit",
            "Other",
        ]

    def test_item_order_within_category(self):
        plan = [_day("LUNEDI", ("Pera", "1 pera"), ("Banana", "1 banana"), ("Pere", "2 pere"))]
        fruit = generate_shopping_list(plan)[0]
        assert [i.item for i in fruit.items] == ["Pera", "Banana"]
        assert fruit.items[0].quantity == "1 pera, 2 pere"

    def test_display_name_capitalized(self):
        plan = [_day("LUNEDI", ("pane", "pane"))]
        assert generate_shopping_list(plan)[0].items[0].item == "Pane"

    def test_quantities_not_summed(self):
        plan = [
            _day("LUNEDI", ("Riso", "80g riso")),
            _day("MARTEDI", ("Riso", "70g riso")),
        ]
        item = generate_shopping_list(plan)[0].items[0]
        assert item.quantity == "80g riso, 70g riso"
        assert item.quantity_value is None

    def test_empty_plan(self):
        assert generate_shopping_list([]) == []
