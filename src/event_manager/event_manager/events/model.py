from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import EventStatus

# Keys owned by the workflow; everything else an organizer sends is kept in ``details``
RESERVED_FIELDS = frozenset(
    {
        "id",
        "organizerId",
        "organizationId",
        "name",
        "date",
        "venue",
        "status",
        "createdAt",
        "approvedAt",
        "rejectedAt",
        "registrations",
    }
)


@dataclass(frozen=True)
class Event:
    """Domain entity: an event going through the approval workflow."""

    event_id: int
    organizer_id: int
    organization_id: int
    name: str
    date: str
    venue: Optional[str]
    status: EventStatus
    created_at: str
    approved_at: Optional[str] = None
    rejected_at: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = dict(self.details)
        data.update(
            {
                "id": self.event_id,
                "organizerId": self.organizer_id,
                "organizationId": self.organization_id,
                "name": self.name,
                "date": self.date,
                "venue": self.venue,
                "status": self.status.value,
                "createdAt": self.created_at,
            }
        )
        if self.approved_at:
            data["approvedAt"] = self.approved_at
        if self.rejected_at:
            data["rejectedAt"] = self.rejected_at
        return data
