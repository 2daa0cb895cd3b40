"""Legend interaction state for a single chart view."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class InteractionState:
    """Per-diet visibility toggles plus the single hovered diet."""

    visible: dict[str, bool] = field(default_factory=dict)
    hovered: str | None = None

    @classmethod
    def all_visible(cls, diets: Iterable[str]) -> "InteractionState":
        """Create the initial state: every diet shown, nothing hovered."""
        return cls(visible=dict.fromkeys(diets, True))

    def is_visible(self, diet: str) -> bool:
        """Return whether the diet is currently toggled on."""
        return self.visible.get(diet, False)

    def toggle_visibility(self, diet: str) -> None:
        """Flip visibility for one diet, leaving the others untouched."""
        self.visible[diet] = not self.is_visible(diet)

    def set_hovered(self, diet: str) -> None:
        """Record the diet under the pointer."""
        self.hovered = diet

    def clear_hovered(self) -> None:
        """Forget the hovered diet."""
        self.hovered = None


CLICK = "click"
POINTER_ENTER = "pointer_enter"
POINTER_LEAVE = "pointer_leave"


@dataclass(frozen=True)
class InteractionEvent:
    """A legend event dispatched by the chart front end."""

    type: str
    diet: str | None = None
