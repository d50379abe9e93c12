"""Free-text ingredient measures and their gram estimates.

Recipe providers describe quantities as free text ("1/2 cup", "2 tbsp",
"200g", "to taste"). Only a leading number or simple fraction followed by a
unit word is understood; anything else falls back to a 100 g portion.
"""

import re
from dataclasses import dataclass
from enum import Enum

DEFAULT_GRAMS = 100.0
DEFAULT_GRAMS_PER_UNIT = 100.0

UNIT_GRAMS: dict[str, float] = {
    "cup": 240.0,
    "tablespoon": 15.0,
    "tbsp": 15.0,
    "teaspoon": 5.0,
    "tsp": 5.0,
    "slice": 30.0,
    "slices": 30.0,
    "piece": 50.0,
    "pieces": 50.0,
    "oz": 28.0,
    "ounces": 28.0,
    "pound": 454.0,
    "lb": 454.0,
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
}

_MEASURE_PATTERN = re.compile(r"^([\d./]+)\s*([a-zA-Z]+)")


class MeasureParseFailure(Enum):
    """Reasons a measure could not be parsed."""

    EMPTY = "empty"
    NO_MATCH = "no_match"
    INVALID_NUMBER = "invalid_number"
    ZERO_DENOMINATOR = "zero_denominator"


@dataclass(frozen=True)
class ParsedMeasure:
    """A quantity with its unit token."""

    quantity: float
    unit: str

    @property
    def grams_per_unit(self) -> float:
        return UNIT_GRAMS.get(self.unit, DEFAULT_GRAMS_PER_UNIT)

    @property
    def grams(self) -> float:
        return self.quantity * self.grams_per_unit


def parse_measure(text: str | None) -> ParsedMeasure | MeasureParseFailure:
    """Split a measure like ``"1/2 cup"`` into quantity and unit."""
    if not text:
        return MeasureParseFailure.EMPTY
    cleaned = text.strip().lower()
    match = _MEASURE_PATTERN.match(cleaned)
    if match is None:
        return MeasureParseFailure.NO_MATCH
    raw_quantity, unit = match.groups()
    quantity = _parse_quantity(raw_quantity)
    if isinstance(quantity, MeasureParseFailure):
        return quantity
    return ParsedMeasure(quantity=quantity, unit=unit)


def estimate_grams(text: str | None) -> float:
    """Estimate the mass in grams described by a free-text measure."""
    parsed = parse_measure(text)
    if isinstance(parsed, MeasureParseFailure):
        return DEFAULT_GRAMS
    return parsed.grams


def _parse_quantity(raw: str) -> float | MeasureParseFailure:
    if "/" not in raw:
        return _parse_number(raw)
    parts = raw.split("/")
    if len(parts) != 2:
        return MeasureParseFailure.INVALID_NUMBER
    numerator = _parse_number(parts[0])
    denominator = _parse_number(parts[1])
    if isinstance(numerator, MeasureParseFailure):
        return numerator
    if isinstance(denominator, MeasureParseFailure):
        return denominator
    if denominator == 0:
        return MeasureParseFailure.ZERO_DENOMINATOR
    return numerator / denominator


def _parse_number(raw: str) -> float | MeasureParseFailure:
    # Strict: "1..2" is rejected rather than read as 1 by a lenient prefix parse.
    try:
        return float(raw)
    except ValueError:
        return MeasureParseFailure.INVALID_NUMBER
