from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import EventStatus
from .model import Event


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        """Every event, in insertion order."""

        raise NotImplementedError

    def get_by_id(self, event_id: int) -> Optional[Event]:
        raise NotImplementedError

    def create_event(
        self,
        *,
        organizer_id: int,
        organization_id: int,
        name: str,
        date: str,
        venue: Optional[str],
        details: dict[str, Any],
        created_at: str,
    ) -> Event:
        raise NotImplementedError

    def set_status(self, event_id: int, *, status: EventStatus, at: str) -> Optional[Event]:
        """Move an event to ``status`` and stamp approvedAt/rejectedAt."""

        raise NotImplementedError
