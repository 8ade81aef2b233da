from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import error_response, fail
from .container import build_container
from .core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_PORT
from .core.exceptions import DomainError
from .events.controller import register as register_events
from .organizations.controller import register as register_organizations
from .registrations.controller import register as register_registrations
from .storage.base import CollectionStore
from .storage.bootstrap import initialize_data_storage
from .storage.json_store import JsonFileStore
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if e.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, e.message)
        return error_response(e)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return fail("Internal server error", 500)


def create_app(*, store: Optional[CollectionStore] = None) -> Flask:
    """Build the API app; ``store`` replaces the JSON file store (tests pass an InMemoryStore)."""
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))

    if store is None:
        data_dir = getattr(settings, "DATA_DIR", "data")
        if getattr(settings, "AUTO_INIT_DATA", False):
            initialize_data_storage(data_dir)
        store = JsonFileStore(data_dir)
        logger.info("settings=%s data_dir=%s", settings_module, data_dir)

    container = build_container(
        store=store,
        default_admin_password=getattr(settings, "DEFAULT_ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD),
    )
    app.extensions["event_manager"] = container

    _register_error_handlers(app)
    register_organizations(app, container)
    register_users(app, container)
    register_events(app, container)
    register_registrations(app, container)
    register_attendance(app, container)

    return app
