from __future__ import annotations

from flask import Flask, request, session

from ..common.auth import current_user_id, login_required, roles_required
from ..common.datetime_utils import now_local
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", endpoint="attendance")
    @roles_required(UserType.ADMIN, UserType.HR)
    def attendance():
        month = request.args.get("month") or now_local().strftime("%Y-%m")
        return ok({"month": month, "rows": container.attendance_service.list_month(month)})

    @app.route("/api/attendance", methods=["POST"], endpoint="add_attendance")
    @roles_required(UserType.ADMIN, UserType.HR)
    def add_attendance():
        payload = json_body()
        row = container.attendance_service.add_record(
            month=payload.get("month", ""),
            candidate_name=payload.get("candidate_name", ""),
            vendor=payload.get("vendor"),
            role=payload.get("role"),
            base_commission=payload.get("base_commission"),
            candidate_id=payload.get("candidate_id"),
        )
        return ok(row, status=201)

    @app.route("/api/attendance/<record_id>", methods=["PATCH"], endpoint="save_attendance")
    @roles_required(UserType.ADMIN, UserType.HR)
    def save_attendance(record_id: str):
        row = container.attendance_service.save_days_present(record_id, json_body().get("days_present"))
        return ok(row, message="Attendance saved")

    @app.route("/api/store/employees", endpoint="store_employees")
    @roles_required(UserType.STORE_SUPERVISOR)
    def store_employees():
        return ok(container.store_attendance_service.store_employees(session.get("email", "")))

    @app.route("/api/store/attendance", endpoint="store_attendance")
    @roles_required(UserType.STORE_SUPERVISOR)
    def store_attendance():
        day = request.args.get("date") or now_local().date().isoformat()
        email = session.get("email", "")
        return ok(
            {
                "date": day,
                "records": container.store_attendance_service.attendance_for_date(email, day),
                "summary": container.store_attendance_service.daily_summary(email, day),
            }
        )

    @app.route("/api/store/attendance", methods=["POST"], endpoint="save_store_attendance")
    @roles_required(UserType.STORE_SUPERVISOR)
    def save_store_attendance():
        payload = json_body()
        day = payload.get("date") or now_local().date().isoformat()
        saved = container.store_attendance_service.save_day(
            session.get("email", ""), day, payload.get("statuses") or {}
        )
        return ok(saved, message="Attendance saved")

    @app.route("/api/store/attendance/sheet", endpoint="store_attendance_sheet")
    @roles_required(UserType.STORE_SUPERVISOR)
    def store_attendance_sheet():
        month = request.args.get("month") or now_local().strftime("%Y-%m")
        return ok(container.store_attendance_service.monthly_sheet(session.get("email", ""), month))

    @app.route("/api/shifts/active", endpoint="active_shift")
    @login_required
    def active_shift():
        return ok(container.shift_service.active_shift(current_user_id()))

    @app.route("/api/shifts/start", methods=["POST"], endpoint="start_shift")
    @login_required
    def start_shift():
        return ok(container.shift_service.start(current_user_id()), status=201, message="Clocked in")

    @app.route("/api/shifts/end", methods=["POST"], endpoint="end_shift")
    @login_required
    def end_shift():
        return ok(container.shift_service.end(current_user_id()), message="Clocked out")
