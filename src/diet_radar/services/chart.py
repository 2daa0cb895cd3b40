"""Radar chart assembly from the loaded dataset and interaction state."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from diet_radar.domain.chart import (
    CenterFillSeries,
    ChartRow,
    LegendItem,
    RadarSeries,
    RadarView,
    RadiusAxis,
    SimilarityPoint,
    SimilarityView,
)
from diet_radar.domain.diets import (
    DIET_COLORS,
    DIETS,
    NutrientRecord,
    diet_display_name,
)
from diet_radar.domain.interaction import InteractionState
from diet_radar.domain.metrics import MAX_VALUES, METRICS
from diet_radar.services.interaction import (
    fill_opacity,
    legend_background,
    stroke_opacity,
)
from diet_radar.services.normalization import (
    CENTER_FILL_RADIUS,
    SHIFT_FACTOR,
    SHIFT_MIN,
    build_chart_rows,
)

RADAR_TITLE = "Diet Category Radar Chart"
SIMILARITY_TITLE = "Diet Similarity"

_logger = logging.getLogger(__name__)


class DietDataRepository(Protocol):
    """Source of the raw per-diet nutrient data."""

    def load_diets(self) -> dict[str, NutrientRecord]:
        """Return the raw nutrient record for each diet."""

    def load_similarity(self) -> list[SimilarityPoint]:
        """Return similarity scores for the secondary radar."""


@dataclass
class RadarChartService:
    """Builds render-ready radar views."""

    repository: DietDataRepository
    shift_min: float = SHIFT_MIN
    shift_factor: float = SHIFT_FACTOR
    center_fill_radius: float = CENTER_FILL_RADIUS
    debug: bool = False
    _rows: list[ChartRow] | None = field(default=None, init=False, repr=False)

    def rows(self) -> list[ChartRow]:
        """Return the chart rows, computing them on first use."""
        if self._rows is None:
            self._rows = self._compute_rows()
        return self._rows

    def reload(self) -> list[ChartRow]:
        """Re-read the dataset and recompute the chart rows."""
        self._rows = self._compute_rows()
        _logger.info("Reloaded diet dataset: rows=%s", len(self._rows))
        return self._rows

    def build_view(self, state: InteractionState) -> RadarView:
        """Return the full radar view for the given interaction state."""
        series = [
            RadarSeries(
                key=diet,
                name=diet_display_name(diet),
                color=DIET_COLORS[diet],
                fill_opacity=fill_opacity(state, diet),
                stroke_opacity=stroke_opacity(state, diet),
            )
            for diet in DIETS
        ]
        legend = [
            LegendItem(
                key=diet,
                name=diet_display_name(diet),
                color=DIET_COLORS[diet],
                visible=state.is_visible(diet),
                hovered=state.hovered == diet,
                background=legend_background(state, diet),
            )
            for diet in DIETS
        ]
        if self.debug:
            _logger.info(
                "Built radar view: hovered=%s hidden=%s",
                state.hovered,
                [diet for diet in DIETS if not state.is_visible(diet)],
            )
        return RadarView(
            title=RADAR_TITLE,
            rows=self.rows(),
            center_fill=CenterFillSeries(),
            series=series,
            legend=legend,
            radius_axis=RadiusAxis(),
        )

    def build_similarity_view(self) -> SimilarityView:
        """Return the similarity radar view."""
        return SimilarityView(
            title=SIMILARITY_TITLE,
            points=self.repository.load_similarity(),
        )

    def _compute_rows(self) -> list[ChartRow]:
        dataset = self.repository.load_diets()
        missing = [diet for diet in DIETS if diet not in dataset]
        if missing:
            _logger.warning("Diet dataset has no record for: %s", ", ".join(missing))
        return build_chart_rows(
            dataset,
            metrics=METRICS,
            max_values=MAX_VALUES,
            diets=DIETS,
            shift_min=self.shift_min,
            shift_factor=self.shift_factor,
            center_fill=self.center_fill_radius,
        )
