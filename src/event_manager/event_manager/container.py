from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .events.dashboard import DashboardService
from .events.service import EventService
from .events.store_event_repository import StoreEventRepository
from .organizations.service import OrganizationService
from .organizations.store_organization_repository import StoreOrganizationRepository
from .registrations.service import RegistrationService
from .registrations.store_registration_repository import StoreRegistrationRepository
from .storage.base import CollectionStore
from .users.service import AuthService, UserService
from .users.store_user_repository import StoreUserRepository


@dataclass(frozen=True)
class Container:
    store: CollectionStore

    organizations_repo: StoreOrganizationRepository
    users_repo: StoreUserRepository
    events_repo: StoreEventRepository
    registrations_repo: StoreRegistrationRepository
    attendance_repo: StoreAttendanceRepository

    organization_service: OrganizationService
    auth_service: AuthService
    user_service: UserService
    event_service: EventService
    dashboard_service: DashboardService
    registration_service: RegistrationService
    attendance_service: AttendanceService


def build_container(*, store: CollectionStore, default_admin_password: str = DEFAULT_ADMIN_PASSWORD) -> Container:
    organizations_repo = StoreOrganizationRepository(store)
    users_repo = StoreUserRepository(store)
    events_repo = StoreEventRepository(store)
    registrations_repo = StoreRegistrationRepository(store)
    attendance_repo = StoreAttendanceRepository(store)

    organization_service = OrganizationService(
        organizations_repo,
        users_repo,
        default_admin_password=default_admin_password,
    )
    auth_service = AuthService(users_repo, organizations_repo)
    user_service = UserService(users_repo)
    event_service = EventService(events_repo, users_repo, registrations_repo)
    dashboard_service = DashboardService(events_repo, users_repo)
    registration_service = RegistrationService(registrations_repo, events_repo, users_repo)
    attendance_service = AttendanceService(attendance_repo, users_repo)

    return Container(
        store=store,
        organizations_repo=organizations_repo,
        users_repo=users_repo,
        events_repo=events_repo,
        registrations_repo=registrations_repo,
        attendance_repo=attendance_repo,
        organization_service=organization_service,
        auth_service=auth_service,
        user_service=user_service,
        event_service=event_service,
        dashboard_service=dashboard_service,
        registration_service=registration_service,
        attendance_service=attendance_service,
    )
