"""Normalization of raw nutrient values into radar coordinates.

Raw quantities are scaled against a per-metric reference maximum to a 0-100
percentage, then shifted so that every polygon starts from a common inner
radius instead of the cluttered chart center. Missing or unusable values never
raise: they become ``0`` and land on the innermost ring.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Final

from diet_radar.domain.chart import ChartRow
from diet_radar.domain.diets import DIETS, NutrientRecord
from diet_radar.domain.metrics import (
    DAILY_GRAMS_SUFFIX,
    MAX_VALUES,
    METRICS,
    metric_display_name,
)

SHIFT_MIN: Final = 5.0
SHIFT_FACTOR: Final = 0.9
CENTER_FILL_RADIUS: Final = 1.0


def normalize(value: object, max_value: object) -> float:
    """Return ``value`` as a percentage of ``max_value``, or 0 if not computable.

    Values above the maximum are not clamped; negative quantities count as 0.
    """
    try:
        result = float(value) / float(max_value) * 100  # type: ignore[arg-type]
    except (TypeError, ValueError, ZeroDivisionError, OverflowError):
        return 0.0
    if not math.isfinite(result) or result < 0:
        return 0.0
    return result


def shift(
    normalized: float,
    shift_min: float = SHIFT_MIN,
    shift_factor: float = SHIFT_FACTOR,
) -> float:
    """Map a normalized value onto the chart outside the inner dead zone."""
    return shift_min + shift_factor * normalized


def raw_value(record: Mapping[str, object], metric: str) -> object | None:
    """Read a metric from a diet record, preferring the daily-grams field."""
    value = record.get(f"{metric}{DAILY_GRAMS_SUFFIX}")
    if value is None:
        value = record.get(metric)
    return value


def build_chart_rows(  # noqa: PLR0913
    dataset: Mapping[str, NutrientRecord],
    *,
    metrics: Sequence[str] = METRICS,
    max_values: Mapping[str, float] = MAX_VALUES,
    diets: Sequence[str] = DIETS,
    shift_min: float = SHIFT_MIN,
    shift_factor: float = SHIFT_FACTOR,
    center_fill: float = CENTER_FILL_RADIUS,
) -> list[ChartRow]:
    """Build one chart row per metric with a shifted coordinate for every diet."""
    rows = []
    for metric in metrics:
        max_value = max_values.get(metric)
        values = {}
        for diet in diets:
            record = dataset.get(diet)
            if not isinstance(record, Mapping):
                record = {}
            normalized = normalize(raw_value(record, metric), max_value)
            values[diet] = shift(normalized, shift_min, shift_factor)
        rows.append(
            ChartRow(
                metric=metric,
                label=metric_display_name(metric),
                values=values,
                center_fill=center_fill,
            )
        )
    return rows
