"""Italian free-text quantity parsing, formatting and pantry arithmetic."""

from __future__ import annotations

import re

from ..models import ParsedQuantity
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary

# "2-3 noci" -> "2 noci": the lower bound of a range wins
_RANGE = re.compile(r"^(\d+(?:[.,]\d+)?)\s*-\s*\d+(?:[.,]\d+)?")

# Leading number (decimal comma or dot, or a simple fraction) + optional word
_QTY_PATTERN = re.compile(r"^(\d+(?:[.,]\d+)?(?:/\d+)?)\s*([^\W\d_]+)?")


def parse_quantity(
    text: str,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ParsedQuantity | None:
    """Parse an Italian quantity expression.

    Args:
        text: e.g. "150g", "1 banana", "mezza cipolla", "2-3 noci", "sale q.b."

    Returns:
        The value and the word right after it (``vocabulary.generic_unit``
        for a bare number), or None when the text has no leading quantity.
    """
    if not text:
        return None
    desc = _RANGE.sub(r"\1", text.lower().strip(), count=1)

    words = desc.split()
    if words and words[0] in vocabulary.number_words:
        unit = words[1] if len(words) > 1 else vocabulary.generic_unit
        return ParsedQuantity(float(vocabulary.number_words[words[0]]), unit)

    m = _QTY_PATTERN.match(desc)
    if m is None:
        return None

    value = _parse_number(m.group(1))
    if value is None:
        return None
    return ParsedQuantity(value, m.group(2) or vocabulary.generic_unit)


def _parse_number(s: str) -> float | None:
    """Parse "1,5", "2.25" or "1/2"."""
    s = s.replace(",", ".")
    if "/" in s:
        num, den = s.split("/", 1)
        try:
            return float(num) / float(den)
        except (ValueError, ZeroDivisionError):
            return None
    try:
        return float(s)
    except ValueError:
        return None


def _format_number(value: float) -> str:
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_quantity(
    quantity: ParsedQuantity | None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> str:
    """Render a parsed quantity back to text.

    Measurement units are glued to the number ("150g"), words are spaced
    ("1 banana") and the generic unit is omitted.
    """
    if quantity is None:
        return "-"
    number = _format_number(quantity.value)
    unit = quantity.unit
    if unit == vocabulary.generic_unit:
        return number
    if unit in vocabulary.concatenated_units or not unit[:1].isalpha():
        return f"{number}{unit}"
    return f"{number} {unit}"


def subtract_quantity(
    pantry_value: float | None,
    consumed_description: str,
    reverse: bool = False,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> float | None:
    """Deplete (or, with ``reverse``, restore) a pantry amount.

    Not idempotent: each call subtracts again.  A non-quantifiable
    description ("sale q.b.") or an untracked pantry value leaves the
    amount unchanged.
    """
    if pantry_value is None:
        return None
    parsed = parse_quantity(consumed_description, vocabulary)
    if parsed is None:
        return pantry_value
    if reverse:
        return pantry_value + parsed.value
    return pantry_value - parsed.value


def is_depleted(value: float | None, reverse: bool = False) -> bool:
    """True when a depletion left nothing, so the item should be re-bought."""
    return not reverse and value is not None and value <= 0
