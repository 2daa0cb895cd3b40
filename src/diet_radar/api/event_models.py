"""Pydantic models for legend event payloads."""

from typing import Literal

from pydantic import BaseModel

from diet_radar.domain.interaction import InteractionEvent


class LegendEvent(BaseModel):
    """Legend click or hover sent by the chart page."""

    type: Literal["click", "pointer_enter", "pointer_leave"]
    diet: str | None = None

    def to_domain(self) -> InteractionEvent:
        """Convert the payload to a domain event."""
        return InteractionEvent(type=self.type, diet=self.diet)
