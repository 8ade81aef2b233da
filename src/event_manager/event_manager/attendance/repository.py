from __future__ import annotations

from typing import Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def record(self, *, event_id: int, user_id: int, timestamp: str) -> AttendanceRecord:
        """Insert a check-in; ConflictError when one exists for the pair."""

        raise NotImplementedError
