from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from ..common.datetime_utils import parse_timestamp, today_local
from ..core.constants import DASHBOARD_RECENT_LIMIT, UNKNOWN_ORGANIZER
from ..core.enums import EventStatus, Role
from ..users.repository import UserRepository
from .repository import EventRepository
from .service import is_upcoming

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _newest_first(items, created_at):
    return sorted(items, key=lambda x: parse_timestamp(created_at(x)) or _EPOCH, reverse=True)


class DashboardService:
    """Admin dashboard figures, scoped to one organization."""

    def __init__(self, events: EventRepository, users: UserRepository, *, recent_limit: int = DASHBOARD_RECENT_LIMIT):
        self._events = events
        self._users = users
        self._limit = recent_limit

    def stats(self, organization_id: int, *, today: Optional[date] = None) -> dict:
        today = today or today_local()
        org_users = list(self._users.list_by_organization(int(organization_id)))
        org_events = [e for e in self._events.list_all() if e.organization_id == int(organization_id)]
        names = {u.user_id: u.first_name for u in org_users}

        def organizer(e) -> str:
            return names.get(e.organizer_id) or UNKNOWN_ORGANIZER

        pending = [e for e in org_events if e.status == EventStatus.PENDING]
        newest_events = _newest_first(org_events, lambda e: e.created_at)
        newest_pending = [e for e in newest_events if e.status == EventStatus.PENDING]

        return {
            "pendingApprovals": len(pending),
            "pendingOrganizers": [
                u.to_public() for u in org_users if u.role == Role.ORGANIZER and not u.approved
            ],
            "activeEvents": sum(
                1 for e in org_events if e.status == EventStatus.APPROVED and is_upcoming(e, today)
            ),
            "totalUsers": len(org_users),
            "pendingEvents": [
                {
                    "id": e.event_id,
                    "name": e.name,
                    "organizer": organizer(e),
                    "date": e.date,
                    "venue": e.venue,
                    "status": e.status.value,
                }
                for e in newest_pending[: self._limit]
            ],
            "recentEvents": [
                {
                    "id": e.event_id,
                    "name": e.name,
                    "organizer": organizer(e),
                    "date": e.date,
                    "status": e.status.value,
                }
                for e in newest_events[: self._limit]
            ],
            "recentUsers": [
                {
                    "firstName": u.first_name,
                    "lastName": u.last_name,
                    "email": u.email,
                    "role": u.role.value,
                    "createdAt": u.created_at,
                }
                for u in _newest_first(org_users, lambda u: u.created_at)[: self._limit]
            ],
        }
