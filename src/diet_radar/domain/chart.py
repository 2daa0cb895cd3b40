"""Render-ready chart models handed to the charting library."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChartRow:
    """One radar axis: a metric with a shifted coordinate per diet."""

    metric: str
    label: str
    values: dict[str, float]
    center_fill: float


@dataclass(frozen=True)
class CenterFillSeries:
    """Background series that shades the innermost ring."""

    data_key: str = "centerFill"
    fill: str = "#eeeeee"
    fill_opacity: float = 1.0
    stroke: str | None = None
    animated: bool = False


@dataclass(frozen=True)
class RadarSeries:
    """Drawing instructions for one diet's polygon."""

    key: str
    name: str
    color: str
    fill_opacity: float
    stroke_opacity: float


@dataclass(frozen=True)
class LegendItem:
    """Clickable legend entry for one diet."""

    key: str
    name: str
    color: str
    visible: bool
    hovered: bool
    background: str


@dataclass(frozen=True)
class RadiusAxis:
    """Radial axis and grid settings."""

    domain: tuple[float, float] = (0, 100)
    tick_count: int = 5
    grid_type: str = "circle"
    radial_lines: bool = False


@dataclass(frozen=True)
class RadarView:
    """Everything needed to draw the diet comparison radar once."""

    title: str
    rows: list[ChartRow]
    center_fill: CenterFillSeries
    series: list[RadarSeries]
    legend: list[LegendItem]
    radius_axis: RadiusAxis = field(default_factory=RadiusAxis)


@dataclass(frozen=True)
class SimilarityPoint:
    """Similarity score between the user's diet and one archetype."""

    name: str
    value: float


@dataclass(frozen=True)
class SimilarityView:
    """Single-series radar of similarity scores."""

    title: str
    points: list[SimilarityPoint]
    stroke: str = "#8884d8"
    fill: str = "#8884d8"
    fill_opacity: float = 0.6
