from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Registration


class RegistrationRepository(Protocol):
    def list_all(self) -> Sequence[Registration]:
        raise NotImplementedError

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        raise NotImplementedError

    def get_for_event_and_user(self, event_id: int, user_id: int) -> Optional[Registration]:
        raise NotImplementedError

    def list_by_event(self, event_id: int) -> Sequence[Registration]:
        raise NotImplementedError

    def list_by_user(self, user_id: int) -> Sequence[Registration]:
        raise NotImplementedError

    def create_registration(
        self,
        *,
        event_id: int,
        user_id: int,
        qr_data: str,
        qr_code: str,
        created_at: str,
    ) -> Registration:
        """Persist a registration; ConflictError when the pair is already registered."""

        raise NotImplementedError
