from __future__ import annotations

from flask import Flask

from ..common.auth import roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", endpoint="employees")
    @roles_required(UserType.ADMIN, UserType.HR)
    def employees():
        return ok(
            {
                "employees": container.employee_service.list_employees(),
                "onboarding": container.employee_service.onboarding_candidates(),
            }
        )

    @app.route("/api/employees/onboard/<candidate_id>", methods=["POST"], endpoint="onboard_employee")
    @roles_required(UserType.ADMIN, UserType.HR)
    def onboard_employee(candidate_id: str):
        employee = container.employee_service.onboard(candidate_id, json_body())
        return ok(employee, status=201, message=f"Employee {employee.id} created")

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="edit_employee")
    @roles_required(UserType.ADMIN, UserType.HR)
    def edit_employee(employee_id: str):
        return ok(container.employee_service.update(employee_id, json_body()), message="Employee updated")
