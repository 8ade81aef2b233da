"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

USERS = "users"
EVENTS = "events"
REGISTRATIONS = "registrations"
ORGANIZATIONS = "organizations"
ATTENDANCE = "attendance"

COLLECTIONS = (USERS, EVENTS, REGISTRATIONS, ORGANIZATIONS, ATTENDANCE)

DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_PORT = 3000
DASHBOARD_RECENT_LIMIT = 5
UNKNOWN_ORGANIZER = "Unknown"
