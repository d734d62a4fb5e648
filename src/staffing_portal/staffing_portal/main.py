from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .candidates.controller import register as register_candidates
from .common.responses import fail
from .complaints.controller import register as register_complaints
from .container import build_container, build_store
from .core.exceptions import AuthenticationError, AuthorizationError, DomainError, NotFoundError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .database.seed import ensure_demo_data
from .demo_requests.controller import register as register_demo_requests
from .employees.controller import register as register_employees
from .jobs.controller import register as register_jobs
from .payroll.controller import register as register_payroll
from .reports.controller import register as register_reports
from .requirements.controller import register as register_requirements
from .resignations.controller import register as register_resignations
from .settings.controller import register as register_settings
from .streams.controller import register as register_streams
from .supervisors.controller import register as register_supervisors
from .users.controller import register as register_users

_ERROR_STATUS = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def domain_error(exc: DomainError):
        for exc_type, status in _ERROR_STATUS:
            if isinstance(exc, exc_type):
                return fail(str(exc), status)
        return fail(str(exc), 400)

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return fail(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def unexpected(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        return fail("Something went wrong, please try again", 500)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", 7))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    doc_store = str(getattr(settings, "DOC_STORE", "memory")).lower()
    db_config = getattr(settings, "DB_CONFIG", {})
    app.logger.info("Starting staffing portal: settings=%s store=%s", settings_module, doc_store)

    if doc_store == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(conn, schema_path=schema_path)
        app.logger.info("Schema ready (tables=%d)", len(list_tables(conn)))

    container = build_container(
        store=build_store(doc_store=doc_store, db_config=db_config),
        default_candidate_password=getattr(settings, "DEFAULT_CANDIDATE_PASSWORD", "password123"),
        direct_client_revenue=getattr(settings, "DIRECT_CLIENT_REVENUE", 10000),
        default_team_salary=getattr(settings, "DEFAULT_TEAM_SALARY", 30000),
    )
    app.extensions["container"] = container

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_data(container)

    register_error_handlers(app)

    register_users(app, container)
    register_jobs(app, container)
    register_candidates(app, container)
    register_complaints(app, container)
    register_requirements(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_supervisors(app, container)
    register_resignations(app, container)
    register_demo_requests(app, container)
    register_employees(app, container)
    register_payroll(app, container)
    register_reports(app, container)
    register_streams(app, container)

    return app
