"""Diet archetypes compared on the radar."""

from typing import Final

from diet_radar.domain.metrics import title_case_identifier

USER_DIET: Final = "user_diet"
USER_DIET_LABEL: Final = "Your Diet"

# Render order; the user's own diet always comes first.
DIETS: Final[tuple[str, ...]] = (
    USER_DIET,
    "balanced_omnivore",
    "pescatarian",
    "vegetarian",
    "vegan",
    "paleo",
    "keto",
    "carnivore",
)

DIET_COLORS: Final[dict[str, str]] = {
    USER_DIET: "#2196F3",
    "balanced_omnivore": "gold",
    "pescatarian": "violet",
    "vegetarian": "#66BB6A",
    "vegan": "teal",
    "paleo": "#F57C00",
    "keto": "red",
    "carnivore": "maroon",
}

# Raw nutrient fields for one diet, keyed "<metric>_g_day" or "<metric>".
NutrientRecord = dict[str, object]


def diet_display_name(diet: str) -> str:
    """Return the legend label for a diet."""
    if diet == USER_DIET:
        return USER_DIET_LABEL
    return title_case_identifier(diet)


def is_known_diet(diet: str) -> bool:
    """Return true when the identifier is one of the compared diets."""
    return diet in DIET_COLORS
