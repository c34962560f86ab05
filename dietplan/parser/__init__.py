"""Heuristic, line-oriented parser for diet-plan text."""

from .blocks import process_meal_block
from .categories import categorize
from .ingredients import extract_ingredient_name, singularize
from .lines import find_repeated_lines, merge_continuations, prepare_lines
from .offline import OfflineParser, parse_pdf_text
from .segmenter import RawDay, RawMealBlock, segment_days
from .shopping import generate_shopping_list

__all__ = [
    "OfflineParser",
    "parse_pdf_text",
    "find_repeated_lines",
    "merge_continuations",
    "prepare_lines",
    "segment_days",
    "RawDay",
    "RawMealBlock",
    "process_meal_block",
    "extract_ingredient_name",
    "singularize",
    "categorize",
    "generate_shopping_list",
]
