"""End-to-end tests for the offline diet-plan parser."""

import pytest

from dietplan.parser.offline import OfflineParser, parse_pdf_text
from dietplan.vocabulary import DAY_KEYWORDS, MEAL_KEYWORDS, Vocabulary

HEADER = "Diet Plan — Dr. Smith"

# Meal keywords stay on at most half of the pages; only the header repeats more.
WEEK_PAGES = [
    f"""{HEADER}
LUNEDÌ
COLAZIONE
- 150g yogurt greco
- 30g avena; 1 cucchiaino di miele
SPUNTINO
- 1 mela
PRANZO
Pasta al pomodoro
- 80g pasta integrale
- 100g passata di pomodoro
OPPURE
- 80g riso
CENA
- 150g merluzzo
- verdure grigliate
Pagina 1""",
    f"""{HEADER}
MARTEDI
COLAZIONE
- 200ml latte
- 2 fette biscottate
MERENDA
- 2 mele
CENA
- 2 uova
- 1 vasetto di yogurt di so
-
ia
Pagina 2""",
    f"""{HEADER}
MERCOLEDI
Giornata libera
GIOVEDI
SPUNTINO
MERENDA
Pizza margherita
Pagina 3""",
    f"""{HEADER}
note finali
Pagina 4""",
]


@pytest.fixture
def parser():
    return OfflineParser()


class TestScenarios:
    def test_boilerplate_removed(self):
        pages = [
            f"{HEADER}\nLUNEDI\nCOLAZIONE\n- 150g yogurt greco\n- 30g avena",
            f"{HEADER}\nnote finali",
        ]
        data = parse_pdf_text(pages)

        assert len(data.weekly_plan) == 1
        day = data.weekly_plan[0]
        assert day.day == "LUNEDI"
        assert len(day.meals) == 1
        meal = day.meals[0]
        assert meal.name == "COLAZIONE"
        assert len(meal.items) == 2
        assert meal.title != HEADER
        for item in meal.items:
            assert HEADER not in item.full_description

    def test_hyphen_continuation(self, parser):
        data = parser.parse(WEEK_PAGES)
        tuesday = data.weekly_plan[1]
        dinner = tuesday.meals[-1]
        assert dinner.items[-1].full_description == "1 vasetto di yogurt di so-ia"


class TestOfflineParser:
    def test_week_structure(self, parser):
        data = parser.parse(WEEK_PAGES)
        assert [d.day for d in data.weekly_plan] == ["LUNEDI", "MARTEDI", "GIOVEDI"]

        monday = data.weekly_plan[0]
        assert [m.name for m in monday.meals] == ["COLAZIONE", "SPUNTINO", "PRANZO", "CENA"]
        breakfast = monday.meals[0]
        assert [i.full_description for i in breakfast.items] == [
            "150g yogurt greco",
            "30g avena",
            "1 cucchiaino di miele",
        ]
        assert breakfast.time == "08:00"

        lunch = monday.meals[2]
        assert lunch.title == "Pasta al pomodoro"
        assert [i.ingredient_name for i in lunch.items] == [
            "Pasta integrale",
            "Passata pomodoro",
            "Riso",
        ]

    def test_empty_day_and_meal_dropped(self, parser):
        data = parser.parse(WEEK_PAGES)
        thursday = data.weekly_plan[-1]
        assert thursday.day == "GIOVEDI"
        # SPUNTINO has neither title nor items
        assert [m.name for m in thursday.meals] == ["MERENDA"]
        assert thursday.meals[0].title == "Pizza margherita"
        assert thursday.meals[0].items == []

    def test_shopping_list_merges_plurals(self, parser):
        data = parser.parse(WEEK_PAGES)
        fruit = next(c for c in data.shopping_list if c.category == "Fruit")
        apples = next(i for i in fruit.items if i.item == "Mela")
        assert apples.quantity == "1 mela, 2 mele"

    def test_shopping_list_sorted(self, parser):
        data = parser.parse(WEEK_PAGES)
        names = [c.category for c in data.shopping_list]
        assert names == sorted(names)

    def test_invariants(self, parser):
        data = parser.parse(WEEK_PAGES)
        for day in data.weekly_plan:
            assert day.day in DAY_KEYWORDS
            assert day.meals
            for meal in day.meals:
                assert meal.name in MEAL_KEYWORDS
                assert meal.items or meal.title
                for item in meal.items:
                    assert item.ingredient_name

    def test_idempotent(self, parser):
        assert parser.parse(WEEK_PAGES) == parser.parse(WEEK_PAGES)
        assert parser.parse(WEEK_PAGES).to_dict() == parse_pdf_text(WEEK_PAGES).to_dict()

    def test_empty_input(self, parser):
        data = parser.parse([])
        assert data.weekly_plan == []
        assert data.shopping_list == []

    def test_only_boilerplate(self, parser):
        data = parser.parse([HEADER, HEADER, HEADER])
        assert data.weekly_plan == []
        assert data.shopping_list == []

    def test_text_without_days(self, parser):
        data = parser.parse(["COLAZIONE\n- 1 mela"])
        assert data.weekly_plan == []

    def test_tuple_accepted(self, parser):
        data = parser.parse(tuple(WEEK_PAGES))
        assert len(data.weekly_plan) == 3

    def test_rejects_non_list(self, parser):
        with pytest.raises(TypeError):
            parser.parse("LUNEDI\nCOLAZIONE\n- mela")

    def test_rejects_non_string_page(self, parser):
        with pytest.raises(TypeError, match=r"page_texts\[1\]"):
            parser.parse(["LUNEDI", 42])

    def test_custom_vocabulary(self):
        vocab = Vocabulary(
            day_keywords=("MONDAY",),
            meal_keywords=("BREAKFAST",),
            meal_times={"BREAKFAST": "07:15"},
        )
        data = OfflineParser(vocab).parse(["Monday\nBreakfast\n- 2 eggs"])
        meal = data.weekly_plan[0].meals[0]
        assert meal.name == "BREAKFAST"
        assert meal.time == "07:15"

    def test_to_dict_field_names(self, parser):
        data = parser.parse(WEEK_PAGES).to_dict()
        assert set(data) == {"weeklyPlan", "shoppingList"}
        item = data["weeklyPlan"][0]["meals"][0]["items"][0]
        assert set(item) == {"ingredientName", "fullDescription", "used"}

    def test_glued_list_number(self, parser):
        data = parser.parse(["LUNEDI\nCOLAZIONE\n2)riso", "x"])
        item = data.weekly_plan[0].meals[0].items[0]
        assert item.ingredient_name == "Riso"
        assert [i.item for c in data.shopping_list for i in c.items] == ["Riso"]
