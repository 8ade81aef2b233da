from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import USERS
from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..storage.base import CollectionStore, DuplicateRecordError
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        first_name=row.get("firstName", ""),
        last_name=row.get("lastName", ""),
        email=row.get("email", ""),
        password_hash=row.get("passwordHash", ""),
        role=Role(row["role"]),
        organization_id=int(row.get("organizationId") or 0),
        approved=bool(row.get("approved", False)),
        created_at=row.get("createdAt", ""),
        approved_at=row.get("approvedAt"),
        rejected_at=row.get("rejectedAt"),
    )


def _stamp_approval(record: dict, approved: bool, at: str) -> None:
    record["approved"] = approved
    if approved:
        record["approvedAt"] = at
    else:
        record["rejectedAt"] = at


class StoreUserRepository(UserRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._store.find(USERS, user_id)
        return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.casefold()
        for row in self._store.read_collection(USERS):
            if str(row.get("email", "")).casefold() == wanted:
                return _to_user(row)
        return None

    def list_all(self) -> Sequence[User]:
        return [_to_user(r) for r in self._store.read_collection(USERS)]

    def list_by_organization(self, organization_id: int) -> Sequence[User]:
        rows = self._store.read_collection(USERS)
        return [_to_user(r) for r in rows if r.get("organizationId") == organization_id]

    def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        role: Role,
        organization_id: int,
        approved: bool,
        created_at: str,
    ) -> User:
        try:
            row = self._store.insert(
                USERS,
                {
                    "firstName": first_name,
                    "lastName": last_name,
                    "email": email,
                    "passwordHash": password_hash,
                    "role": role.value,
                    "organizationId": organization_id,
                    "approved": approved,
                    "createdAt": created_at,
                },
                unique_on=("email",),
            )
        except DuplicateRecordError:
            raise ConflictError("Email already registered")
        return _to_user(row)

    def set_approved(self, user_id: int, *, approved: bool, at: str) -> Optional[User]:
        row = self._store.update(USERS, user_id, lambda r: _stamp_approval(r, approved, at))
        return _to_user(row) if row else None

    def toggle_approved(self, user_id: int, *, at: str) -> Optional[User]:
        row = self._store.update(USERS, user_id, lambda r: _stamp_approval(r, not r.get("approved", False), at))
        return _to_user(row) if row else None
