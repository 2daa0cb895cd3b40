"""Opacity derivation from legend interaction state."""

from typing import Final

from diet_radar.domain.interaction import InteractionState

HIDDEN_OPACITY: Final = 0.0
FILL_OPACITY_IDLE: Final = 0.1
FILL_OPACITY_HOVERED: Final = 0.3
FILL_OPACITY_DIMMED: Final = 0.05
STROKE_OPACITY_IDLE: Final = 1.0
STROKE_OPACITY_HOVERED: Final = 1.0
STROKE_OPACITY_DIMMED: Final = 0.2

LEGEND_BACKGROUND_VISIBLE: Final = "#eee"
LEGEND_BACKGROUND_HIDDEN: Final = "#ccc"


def fill_opacity(state: InteractionState, diet: str) -> float:
    """Return the polygon fill opacity for a diet."""
    if not state.is_visible(diet):
        return HIDDEN_OPACITY
    if state.hovered is None:
        return FILL_OPACITY_IDLE
    return FILL_OPACITY_HOVERED if diet == state.hovered else FILL_OPACITY_DIMMED


def stroke_opacity(state: InteractionState, diet: str) -> float:
    """Return the polygon outline opacity for a diet."""
    if not state.is_visible(diet):
        return HIDDEN_OPACITY
    if state.hovered is None:
        return STROKE_OPACITY_IDLE
    return STROKE_OPACITY_HOVERED if diet == state.hovered else STROKE_OPACITY_DIMMED


def legend_background(state: InteractionState, diet: str) -> str:
    """Return the legend chip background, greyed out for hidden diets."""
    if state.is_visible(diet):
        return LEGEND_BACKGROUND_VISIBLE
    return LEGEND_BACKGROUND_HIDDEN
