from __future__ import annotations

from flask import Flask, request

from ..common.auth import roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container
from .ctc import CTCBreakdown


def _breakdown_json(b: CTCBreakdown) -> dict:
    return {"monthly": b.monthly.rounded(), "annual": b.annual.rounded()}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/rules", endpoint="salary_rules")
    @roles_required(UserType.ADMIN, UserType.HR)
    def salary_rules():
        return ok(container.salary_rule_service.list_rules())

    @app.route("/api/payroll/rules", methods=["PUT"], endpoint="save_salary_rule")
    @roles_required(UserType.ADMIN, UserType.HR)
    def save_salary_rule():
        return ok(container.salary_rule_service.save_rule(json_body()), message="Salary rule saved")

    @app.route("/api/payroll/rules/<designation>", methods=["DELETE"], endpoint="delete_salary_rule")
    @roles_required(UserType.ADMIN, UserType.HR)
    def delete_salary_rule(designation: str):
        container.salary_rule_service.delete_rule(designation)
        return ok(message="Salary rule deleted")

    @app.route("/api/payroll/ctc", endpoint="ctc_breakdown")
    @roles_required(UserType.ADMIN, UserType.HR)
    def ctc_breakdown():
        designation = request.args.get("designation")
        if request.args.get("net"):
            b = container.salary_rule_service.breakdown_from_net(request.args.get("net"), designation)
        else:
            b = container.salary_rule_service.breakdown_from_ctc(request.args.get("ctc", 0), designation)
        return ok(_breakdown_json(b))
