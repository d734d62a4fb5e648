from __future__ import annotations

from flask import Flask, request

from ..common.auth import current_user_id, current_user_type, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/requirements", endpoint="requirements")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD, UserType.TEAM)
    def requirements():
        return ok(container.requirement_service.list_requirements(status=request.args.get("status", "")))

    @app.route("/api/partner/requirements", endpoint="partner_requirements")
    @roles_required(UserType.PARTNER)
    def partner_requirements():
        return ok(
            container.requirement_service.list_requirements(
                partner_id=current_user_id(), status=request.args.get("status", "")
            )
        )

    @app.route("/api/partner/requirements", methods=["POST"], endpoint="add_partner_requirement")
    @roles_required(UserType.PARTNER)
    def add_partner_requirement():
        req = container.requirement_service.create(
            current_type=current_user_type(), partner_id=current_user_id(), payload=json_body()
        )
        return ok(req, status=201, message="Requirement submitted for review")

    @app.route("/api/requirements/<requirement_id>/approve", methods=["POST"], endpoint="approve_requirement")
    @roles_required(UserType.ADMIN)
    def approve_requirement(requirement_id: str):
        req = container.requirement_service.approve(
            current_type=current_user_type(),
            admin_user_id=current_user_id(),
            requirement_id=requirement_id,
            admin_note=json_body().get("admin_note", ""),
        )
        return ok(req, message="Requirement approved")

    @app.route("/api/requirements/<requirement_id>/reject", methods=["POST"], endpoint="reject_requirement")
    @roles_required(UserType.ADMIN)
    def reject_requirement(requirement_id: str):
        req = container.requirement_service.reject(
            current_type=current_user_type(),
            admin_user_id=current_user_id(),
            requirement_id=requirement_id,
            admin_note=json_body().get("admin_note", ""),
        )
        return ok(req, message="Requirement rejected")

    @app.route("/api/requirements/<requirement_id>", methods=["DELETE"], endpoint="delete_requirement")
    @roles_required(UserType.ADMIN, UserType.PARTNER)
    def delete_requirement(requirement_id: str):
        container.requirement_service.delete(
            current_type=current_user_type(), partner_id=current_user_id(), requirement_id=requirement_id
        )
        return ok(message="Requirement deleted")
