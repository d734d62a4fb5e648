from __future__ import annotations

from flask import Flask, session

from ..common.auth import current_user_id, current_user_type, login_required, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/resignations", endpoint="resignations")
    @roles_required(UserType.ADMIN, UserType.HR)
    def resignations():
        return ok(container.resignation_service.list_all())

    @app.route("/api/resignations/mine", endpoint="my_resignations")
    @login_required
    def my_resignations():
        return ok(container.resignation_service.list_for_employee(current_user_id()))

    @app.route("/api/resignations", methods=["POST"], endpoint="submit_resignation")
    @roles_required(UserType.CANDIDATE)
    def submit_resignation():
        res = container.resignation_service.submit(
            employee_id=current_user_id(),
            employee_name=session.get("name"),
            reason=json_body().get("reason", ""),
        )
        return ok(res, status=201, message="Resignation submitted")

    @app.route("/api/resignations/<resignation_id>/approve", methods=["POST"], endpoint="approve_resignation")
    @roles_required(UserType.ADMIN, UserType.HR)
    def approve_resignation(resignation_id: str):
        payload = json_body()
        res = container.resignation_service.approve(
            current_type=current_user_type(),
            resignation_id=resignation_id,
            notice_period_start_date=payload.get("notice_period_start_date", ""),
            last_working_day=payload.get("last_working_day", ""),
            hr_remarks=payload.get("hr_remarks", ""),
        )
        return ok(res, message="Resignation approved")

    @app.route("/api/resignations/<resignation_id>/reject", methods=["POST"], endpoint="reject_resignation")
    @roles_required(UserType.ADMIN, UserType.HR)
    def reject_resignation(resignation_id: str):
        res = container.resignation_service.reject(
            current_type=current_user_type(),
            resignation_id=resignation_id,
            hr_remarks=json_body().get("hr_remarks", ""),
        )
        return ok(res, message="Resignation rejected")
