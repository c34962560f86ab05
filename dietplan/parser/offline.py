"""Offline diet-plan parser: page texts in, weekly plan and shopping list out."""

from __future__ import annotations

import logging

from ..models import DayPlan, MealPlanData
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .blocks import process_meal_block
from .lines import prepare_lines
from .segmenter import RawDay, segment_days
from .shopping import generate_shopping_list

logger = logging.getLogger(__name__)


class OfflineParser:
    """Deterministic, AI-free parser for text extracted from a diet-plan PDF.

    Stateless: every call to :meth:`parse` builds fresh structures, so one
    instance can be shared freely.
    """

    def __init__(self, vocabulary: Vocabulary | None = None) -> None:
        self._vocabulary = vocabulary or DEFAULT_VOCABULARY

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def parse(self, page_texts: list[str]) -> MealPlanData:
        """Parse the per-page text of a diet plan.

        Args:
            page_texts: Text of each page, in page order.

        Returns:
            The weekly plan and its aggregated shopping list.  Both are empty
            when nothing recognisable is found.

        Raises:
            TypeError: If ``page_texts`` is not a list of strings.
        """
        _check_page_texts(page_texts)

        lines = prepare_lines(list(page_texts))
        logger.debug("%d pages -> %d lines", len(page_texts), len(lines))

        weekly_plan = []
        for raw_day in segment_days(lines, self._vocabulary):
            day = self._build_day(raw_day)
            if day.meals:
                weekly_plan.append(day)
            else:
                logger.debug("Dropping %s: no meals", raw_day.day)

        shopping_list = generate_shopping_list(weekly_plan, self._vocabulary)
        logger.debug(
            "Parsed %d days, %d meals",
            len(weekly_plan),
            sum(len(d.meals) for d in weekly_plan),
        )
        return MealPlanData(weekly_plan=weekly_plan, shopping_list=shopping_list)

    def _build_day(self, raw_day: RawDay) -> DayPlan:
        day = DayPlan(day=raw_day.day)
        for block in raw_day.blocks:
            meal = process_meal_block(block, self._vocabulary)
            if meal.is_empty():
                logger.debug("Dropping empty %s on %s", meal.name, raw_day.day)
                continue
            day.meals.append(meal)
        return day


def _check_page_texts(page_texts: object) -> None:
    if not isinstance(page_texts, (list, tuple)):
        raise TypeError(
            f"page_texts must be a list of str, got {type(page_texts).__name__}"
        )
    for index, text in enumerate(page_texts):
        if not isinstance(text, str):
            raise TypeError(
                f"page_texts[{index}] must be a str, got {type(text).__name__}"
            )


def parse_pdf_text(
    page_texts: list[str],
    vocabulary: Vocabulary | None = None,
) -> MealPlanData:
    """Parse page texts with the default (or given) vocabulary."""
    return OfflineParser(vocabulary).parse(page_texts)
