from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup."""

        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def list_by_organization(self, organization_id: int) -> Sequence[User]:
        raise NotImplementedError

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
        """Persist a new user; ConflictError when the email is taken."""

        raise NotImplementedError

    def set_approved(self, user_id: int, *, approved: bool, at: str) -> Optional[User]:
        raise NotImplementedError

    def toggle_approved(self, user_id: int, *, at: str) -> Optional[User]:
        raise NotImplementedError
