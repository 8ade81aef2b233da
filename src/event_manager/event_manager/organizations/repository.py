from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Organization


class OrganizationRepository(Protocol):
    def list_all(self) -> Sequence[Organization]:
        raise NotImplementedError

    def get_by_id(self, organization_id: int) -> Optional[Organization]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Organization]:
        """Case-insensitive lookup."""

        raise NotImplementedError

    def create(self, *, name: str, org_type: str, created_at: str) -> Organization:
        """Persist a new organization; ConflictError when the name is taken."""

        raise NotImplementedError
