"""Fixed Italian vocabularies used by the offline diet-plan parser.

Every table here is immutable.  Stages receive a :class:`Vocabulary` so that a
different keyword set (another locale, a nutritionist's house style) can be
swapped in without touching the parsing code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Week days, one canonical spelling each (accents are folded before matching)
DAY_KEYWORDS: tuple[str, ...] = (
    "LUNEDI",
    "MARTEDI",
    "MERCOLEDI",
    "GIOVEDI",
    "VENERDI",
    "SABATO",
    "DOMENICA",
)

MEAL_KEYWORDS: tuple[str, ...] = (
    "COLAZIONE",
    "SPUNTINO",
    "PRANZO",
    "MERENDA",
    "CENA",
)

MEAL_TIMES: Mapping[str, str] = MappingProxyType({
    "COLAZIONE": "08:00",
    "SPUNTINO": "10:30",
    "PRANZO": "13:00",
    "MERENDA": "16:30",
    "CENA": "19:30",
})

DEFAULT_MEAL_TIME = "12:00"

# Alternative-option markers with no parseable content
IGNORED_LINES: tuple[str, ...] = ("OPPURE", "IN ALTERNATIVA")

# Units stripped from the front of an ingredient description.
# Longest first so that "gr" is not cut down to "g".
QUANTITY_UNITS: tuple[str, ...] = (
    "cucchiaini",
    "cucchiaino",
    "cucchiai",
    "cucchiaio",
    "scatolette",
    "scatoletta",
    "bicchieri",
    "bicchiere",
    "vasetti",
    "vasetto",
    "fette",
    "fetta",
    "kg",
    "gr",
    "ml",
    "g",
    "l",
)

ARTICLES: tuple[str, ...] = (
    "un", "uno", "una", "di", "d'", "del", "dello", "della", "dei", "degli",
    "delle", "con", "e", "a", "al",
)

NUMBER_WORDS: Mapping[str, float] = MappingProxyType({
    "un": 1, "uno": 1, "una": 1,
    "due": 2, "tre": 3, "quattro": 4, "cinque": 5,
    "sei": 6, "sette": 7, "otto": 8, "nove": 9, "dieci": 10,
    "mezza": 0.5, "mezzo": 0.5,
})

# Unit used when a quantity is a bare number ("2" -> 2 unità)
GENERIC_UNIT = "unità"

# Measurement units written glued to the number ("150g", "1l")
CONCATENATED_UNITS: tuple[str, ...] = ("g", "gr", "kg", "hg", "mg", "ml", "cl", "l")

# Tokens the singularizer leaves alone
UNIT_TOKENS: tuple[str, ...] = ("g", "kg", "ml", "l")

SINGULAR_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    "uova": "uovo",
    "cucchiai": "cucchiaio",
    "cucchiaini": "cucchiaino",
    "bicchieri": "bicchiere",
    "vasetti": "vasetto",
    "fette": "fetta",
    "gallette": "galletta",
    "polpette": "polpetta",
    "noci": "noce",
    "funghi": "fungo",
    "gnocchi": "gnocco",
    "limoni": "limone",
    "peperoni": "peperone",
    "spinaci": "spinaci",
    "ceci": "ceci",
    "kiwi": "kiwi",
})

# Singular nouns that look like plurals to the suffix rules
SINGULAR_PASSTHROUGH: tuple[str, ...] = (
    "pane", "latte", "sale", "miele", "pepe", "carne", "pesce", "noce",
    "limone", "peperone", "bicchiere", "the", "caffè", "tè",
)

FALLBACK_CATEGORY = "Other"

# Ordered buckets: the first bucket with a matching keyword wins.
# "fagiolini" sits in Vegetables ahead of the "fagioli" protein keyword,
# "melanzan" ahead of the "mela" fruit keyword.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Vegetables", (
        "verdur", "ortaggi", "insalata", "lattuga", "rucola", "pomodor",
        "carot", "zucchin", "melanzan", "spinaci", "broccol", "cipoll",
        "aglio", "peperon", "fagiolini", "finocchi", "cavol", "asparag",
        "fung", "sedano", "cetriol", "bietol", "carciof", "radicchio",
        "minestrone",
    )),
    ("Fruit", (
        "frutta", "frutti", "mela", "mele", "banan", "arancia", "arance",
        "pera", "pere", "fragol", "kiwi", "pesca", "pesche", "limon",
        "ananas", "mirtill", "uva", "albicocc", "ciliegi", "prugn",
        "mandarin", "melone", "anguria",
    )),
    ("Carbohydrates & Cereals", (
        "pane", "pasta", "riso", "cereali", "patat", "farina", "biscott",
        "gallett", "couscous", "quinoa", "farro", "orzo", "avena",
        "crackers", "grissini", "piadina", "polenta", "gnocc", "muesli",
        "tagliolin", "tagliatell", "sedanin",
    )),
    ("Proteins", (
        "pesce", "tonno", "salmone", "merluzzo", "sgombro", "orata",
        "branzino", "gamber", "polpo", "calamar", "carne", "pollo", "manzo",
        "tacchino", "vitello", "maiale", "prosciutto", "bresaola", "uova",
        "uovo", "legumi", "ceci", "fagioli", "lenticchie", "piselli",
        "tofu", "seitan", "tempeh", "polpett", "hamburger", "finocchiona",
        "salame",
    )),
    ("Dairy", (
        "latte", "yogurt", "formaggi", "ricotta", "parmigiano", "grana",
        "mozzarella", "stracchino", "kefir", "skyr", "scamorza", "pecorino",
    )),
    ("Fats & Nuts", (
        "olio", "burro", "noci", "noce", "mandorl", "nocciol", "pistacchi",
        "semi", "avocado", "arachid", "anacardi",
    )),
    ("Beverages", (
        "acqua", "caffè", "caffe", "the", "tè", "tisana", "succo",
        "spremuta", "bevanda",
    )),
)


# Names containing one of these skip the bucket: "tagliolini" holds "aglio",
# "finocchiona" holds "finocchi".
CATEGORY_EXCLUSIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Vegetables": ("tagliolin", "tagliatell", "sedanin", "finocchiona"),
})


@dataclass(frozen=True)
class Vocabulary:
    """Bundle of keyword tables consumed by every parsing stage."""

    day_keywords: tuple[str, ...] = DAY_KEYWORDS
    meal_keywords: tuple[str, ...] = MEAL_KEYWORDS
    meal_times: Mapping[str, str] = field(default_factory=lambda: MEAL_TIMES)
    default_meal_time: str = DEFAULT_MEAL_TIME
    ignored_lines: tuple[str, ...] = IGNORED_LINES
    quantity_units: tuple[str, ...] = QUANTITY_UNITS
    articles: tuple[str, ...] = ARTICLES
    number_words: Mapping[str, float] = field(default_factory=lambda: NUMBER_WORDS)
    generic_unit: str = GENERIC_UNIT
    concatenated_units: tuple[str, ...] = CONCATENATED_UNITS
    unit_tokens: tuple[str, ...] = UNIT_TOKENS
    singular_exceptions: Mapping[str, str] = field(
        default_factory=lambda: SINGULAR_EXCEPTIONS
    )
    singular_passthrough: tuple[str, ...] = SINGULAR_PASSTHROUGH
    category_keywords: tuple[tuple[str, tuple[str, ...]], ...] = CATEGORY_KEYWORDS
    category_exclusions: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: CATEGORY_EXCLUSIONS
    )
    fallback_category: str = FALLBACK_CATEGORY

    def meal_time(self, meal_name: str) -> str:
        return self.meal_times.get(meal_name, self.default_meal_time)


DEFAULT_VOCABULARY = Vocabulary()
