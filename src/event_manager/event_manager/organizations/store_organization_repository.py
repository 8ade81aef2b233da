from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ORGANIZATIONS
from ..core.exceptions import ConflictError
from ..storage.base import CollectionStore, DuplicateRecordError
from .model import Organization
from .repository import OrganizationRepository


def _to_organization(row: dict) -> Organization:
    return Organization(
        organization_id=int(row["id"]),
        name=row.get("name", ""),
        org_type=row.get("type", ""),
        created_at=row.get("createdAt", ""),
    )


class StoreOrganizationRepository(OrganizationRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Organization]:
        return [_to_organization(r) for r in self._store.read_collection(ORGANIZATIONS)]

    def get_by_id(self, organization_id: int) -> Optional[Organization]:
        row = self._store.find(ORGANIZATIONS, organization_id)
        return _to_organization(row) if row else None

    def get_by_name(self, name: str) -> Optional[Organization]:
        wanted = name.casefold()
        for row in self._store.read_collection(ORGANIZATIONS):
            if str(row.get("name", "")).casefold() == wanted:
                return _to_organization(row)
        return None

    def create(self, *, name: str, org_type: str, created_at: str) -> Organization:
        try:
            row = self._store.insert(
                ORGANIZATIONS,
                {"name": name, "type": org_type, "createdAt": created_at},
                unique_on=("name",),
            )
        except DuplicateRecordError:
            raise ConflictError("Organization already exists")
        return _to_organization(row)
