"""Nutritional metrics plotted on the diet radar."""

from typing import Final

METRICS: Final[tuple[str, ...]] = (
    "red_meat",
    "poultry",
    "seafood",
    "eggs",
    "milk",
    "cheese",
    "yogurt",
    "cream",
    "butter",
    "whole_fruits",
    "juices",
    "leaves",
    "flowers",
    "red_and_orange_vegetables",
    "starchy_vegetables",
    "stems",
    "other_vegetables",
    "mushrooms",
    "beans_and_lentils",
    "soy_products",
    "nuts_and_seeds",
    "oils",
    "refined_sugar",
    "whole_grains",
    "refined_grains",
    "fiber",
    "fat_pct",
    "carbs_pct",
    "protein_pct",
)

# Highest value of each metric across all diets, used as the 100% reference.
MAX_VALUES: Final[dict[str, float]] = {
    "red_meat": 1733,
    "poultry": 347,
    "seafood": 347,
    "eggs": 246,
    "milk": 347,
    "cheese": 347,
    "yogurt": 347,
    "cream": 347,
    "butter": 347,
    "whole_fruits": 805,
    "juices": 146,
    "leaves": 302,
    "flowers": 302,
    "red_and_orange_vegetables": 302,
    "starchy_vegetables": 302,
    "stems": 201,
    "other_vegetables": 201,
    "mushrooms": 101,
    "beans_and_lentils": 224,
    "soy_products": 79,
    "nuts_and_seeds": 83,
    "oils": 116,
    "refined_sugar": 36,
    "whole_grains": 402,
    "refined_grains": 146,
    "fiber": 60,
    "fat_pct": 80,
    "carbs_pct": 65,
    "protein_pct": 45,
}

DAILY_GRAMS_SUFFIX: Final = "_g_day"


def title_case_identifier(identifier: str) -> str:
    """Turn an underscore identifier into space separated, capitalized words."""
    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("_"))


def metric_display_name(metric: str) -> str:
    """Return the axis label for a metric, e.g. ``fat_pct`` -> ``Fat Pct``."""
    return title_case_identifier(metric)
