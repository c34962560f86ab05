"""TOML configuration loader for the diet-plan parser."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType

from .models import PantryItem
from .pantry.inventory import Pantry
from .vocabulary import (
    DEFAULT_MEAL_TIME,
    DEFAULT_VOCABULARY,
    FALLBACK_CATEGORY,
    MEAL_TIMES,
    Vocabulary,
)

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class ParserConfig:
    extra_ignored_lines: list[str] = field(default_factory=list)
    meal_times: dict[str, str] = field(default_factory=lambda: dict(MEAL_TIMES))
    default_time: str = DEFAULT_MEAL_TIME


@dataclass
class CategoriesConfig:
    fallback: str = FALLBACK_CATEGORY
    extra_keywords: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class PantryConfig:
    expiring_days: int = 7


@dataclass
class PdfConfig:
    font_path: str = ""
    title: str = "Piano alimentare settimanale"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class DietPlanConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)
    categories: CategoriesConfig = field(default_factory=CategoriesConfig)
    pantry: PantryConfig = field(default_factory=PantryConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def vocabulary(self) -> Vocabulary:
        """Build the immutable vocabulary with this config's overrides applied."""
        base = DEFAULT_VOCABULARY
        buckets = [(name, tuple(kws)) for name, kws in base.category_keywords]
        for category, keywords in self.categories.extra_keywords.items():
            extra = tuple(k.lower() for k in keywords)
            for i, (name, kws) in enumerate(buckets):
                if name == category:
                    buckets[i] = (name, kws + extra)
                    break
            else:
                buckets.append((category, extra))

        return replace(
            base,
            meal_times=MappingProxyType(dict(self.parser.meal_times)),
            default_meal_time=self.parser.default_time,
            ignored_lines=base.ignored_lines
            + tuple(line.upper() for line in self.parser.extra_ignored_lines),
            category_keywords=tuple(buckets),
            fallback_category=self.categories.fallback,
        )

    def new_pantry(self, items: list[PantryItem] | None = None) -> Pantry:
        return Pantry(items, self.vocabulary(), self.pantry.expiring_days)


def load_config(path: str | Path | None = None) -> DietPlanConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The path defaults to $DIETPLAN_CONFIG, and $DIETPLAN_LOG_LEVEL
    overrides the logging level.
    """
    raw: dict = {}

    if path is None:
        path = os.environ.get("DIETPLAN_CONFIG") or None

    if path is not None:
        p = Path(path).expanduser()
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    prs = raw.get("parser", {})
    cat = raw.get("categories", {})
    pan = raw.get("pantry", {})
    pdf = raw.get("pdf", {})
    log = raw.get("logging", {})

    # Merge custom meal_times with defaults
    meal_times = {**MEAL_TIMES, **prs.get("meal_times", {})}

    level = os.environ.get("DIETPLAN_LOG_LEVEL", "") or log.get("level", "WARNING")

    return DietPlanConfig(
        parser=ParserConfig(
            extra_ignored_lines=list(prs.get("extra_ignored_lines", [])),
            meal_times=meal_times,
            default_time=prs.get("default_time", DEFAULT_MEAL_TIME),
        ),
        categories=CategoriesConfig(
            fallback=cat.get("fallback", FALLBACK_CATEGORY),
            extra_keywords={
                name: list(kws) for name, kws in cat.get("extra_keywords", {}).items()
            },
        ),
        pantry=PantryConfig(
            expiring_days=pan.get("expiring_days", 7),
        ),
        pdf=PdfConfig(
            font_path=pdf.get("font_path", ""),
            title=pdf.get("title", "Piano alimentare settimanale"),
        ),
        logging=LoggingConfig(level=level.upper()),
    )
