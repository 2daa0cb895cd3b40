"""In-memory view sessions holding legend interaction state."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from diet_radar.domain.diets import DIETS
from diet_radar.domain.interaction import (
    CLICK,
    POINTER_ENTER,
    POINTER_LEAVE,
    InteractionEvent,
    InteractionState,
)

_logger = logging.getLogger(__name__)


@dataclass
class _SessionEntry:
    state: InteractionState
    expires_at: datetime


class ViewSessionService:
    """Owns one interaction state per open chart view."""

    def __init__(self, ttl_seconds: int = 3600) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries: dict[UUID, _SessionEntry] = {}

    def start_session(self) -> tuple[UUID, InteractionState]:
        """Create a session with every diet visible and nothing hovered."""
        self._purge_expired()
        session_id = uuid4()
        state = InteractionState.all_visible(DIETS)
        self._entries[session_id] = _SessionEntry(state, self._expiry())
        return session_id, state

    def get_state(self, session_id: UUID) -> InteractionState | None:
        """Return a live session's state and extend its lifetime."""
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(session_id, None)
            return None
        entry.expires_at = self._expiry()
        return entry.state

    def handle_event(
        self, session_id: UUID, event: InteractionEvent
    ) -> InteractionState | None:
        """Apply a legend event to a session; unknown event types are ignored."""
        state = self.get_state(session_id)
        if state is None:
            return None
        if event.type == CLICK and event.diet is not None:
            state.toggle_visibility(event.diet)
        elif event.type == POINTER_ENTER and event.diet is not None:
            state.set_hovered(event.diet)
        elif event.type == POINTER_LEAVE:
            state.clear_hovered()
        else:
            _logger.info("Ignoring legend event: type=%s", event.type)
        return state

    def active_count(self) -> int:
        """Return the number of sessions that have not expired."""
        self._purge_expired()
        return len(self._entries)

    def _expiry(self) -> datetime:
        return datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)

    def _purge_expired(self) -> None:
        now = datetime.now(tz=UTC)
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            self._entries.pop(key, None)
