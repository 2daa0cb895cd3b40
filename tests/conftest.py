"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from diet_radar.config import Settings
from diet_radar.containers import AppContainer
from diet_radar.domain.chart import SimilarityPoint
from diet_radar.domain.diets import DIETS, NutrientRecord
from diet_radar.services.chart import DietDataRepository, RadarChartService
from diet_radar.services.view_sessions import ViewSessionService


@dataclass
class InMemoryDietDataRepository(DietDataRepository):
    """In-memory diet dataset for tests."""

    diets: dict[str, NutrientRecord] = field(default_factory=dict)
    similarity: list[SimilarityPoint] = field(default_factory=list)
    loads: int = 0

    def load_diets(self) -> dict[str, NutrientRecord]:
        self.loads += 1
        return self.diets

    def load_similarity(self) -> list[SimilarityPoint]:
        return self.similarity


def sample_diets() -> dict[str, NutrientRecord]:
    """Sparse records for every diet; unlisted metrics are missing."""
    diets: dict[str, NutrientRecord] = {diet: {} for diet in DIETS}
    diets["user_diet"] = {"red_meat_g_day": 1733, "fiber_g_day": 30, "fat_pct": 40}
    diets["vegan"] = {"red_meat_g_day": 0, "fiber": 60, "carbs_pct": 65}
    diets["carnivore"] = {"red_meat_g_day": 3466, "protein_pct": 45}
    return diets


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token")


@pytest.fixture
def diet_repository() -> InMemoryDietDataRepository:
    return InMemoryDietDataRepository(
        diets=sample_diets(),
        similarity=[
            SimilarityPoint(name="Balanced Omnivore", value=0.92),
            SimilarityPoint(name="Carnivore", value=0.10),
        ],
    )


@pytest.fixture
def chart_service(diet_repository: InMemoryDietDataRepository) -> RadarChartService:
    return RadarChartService(repository=diet_repository)


@pytest.fixture
def container(
    settings: Settings,
    chart_service: RadarChartService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        chart_service=chart_service,
        view_session_service=ViewSessionService(
            ttl_seconds=settings.view_session_ttl_seconds
        ),
    )
