"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_radar.adapters.json_diet_data_repository import JsonDietDataRepository
from diet_radar.config import Settings
from diet_radar.services.chart import RadarChartService
from diet_radar.services.view_sessions import ViewSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    chart_service: RadarChartService
    view_session_service: ViewSessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repository = JsonDietDataRepository.create(
        diet_data_path=resolved_settings.diet_data_path,
        similarity_path=resolved_settings.similarity_data_path,
    )
    chart_service = RadarChartService(
        repository=repository,
        shift_min=resolved_settings.shift_min,
        shift_factor=resolved_settings.shift_factor,
        center_fill_radius=resolved_settings.center_fill_radius,
        debug=resolved_settings.debug,
    )
    view_session_service = ViewSessionService(
        ttl_seconds=resolved_settings.view_session_ttl_seconds
    )
    return AppContainer(
        settings=resolved_settings,
        chart_service=chart_service,
        view_session_service=view_session_service,
    )
