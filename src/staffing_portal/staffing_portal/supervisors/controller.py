from __future__ import annotations

from flask import Flask, request

from ..common.auth import current_user_id, current_user_type, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _partner_scope() -> str | None:
        # Partners only ever see their own supervisors.
        if current_user_type() == UserType.PARTNER:
            return current_user_id()
        return request.args.get("partner_id") or None

    @app.route("/api/supervisors", endpoint="supervisors")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.PARTNER, UserType.TEAMLEAD, UserType.TEAM)
    def supervisors():
        return ok(container.supervisor_service.list_supervisors(_partner_scope()))

    @app.route("/api/supervisors", methods=["POST"], endpoint="add_supervisor")
    @roles_required(UserType.ADMIN, UserType.PARTNER)
    def add_supervisor():
        payload = json_body()
        partner_id = current_user_id() if current_user_type() == UserType.PARTNER else payload.get("partner_id")
        supervisor = container.supervisor_service.create(payload, partner_id=partner_id)
        return ok(supervisor, status=201, message="Supervisor added")

    @app.route("/api/supervisors/<supervisor_id>", methods=["PATCH"], endpoint="edit_supervisor")
    @roles_required(UserType.ADMIN, UserType.PARTNER)
    def edit_supervisor(supervisor_id: str):
        return ok(container.supervisor_service.update(supervisor_id, json_body()), message="Supervisor updated")

    @app.route("/api/supervisors/<supervisor_id>", methods=["DELETE"], endpoint="delete_supervisor")
    @roles_required(UserType.ADMIN, UserType.PARTNER)
    def delete_supervisor(supervisor_id: str):
        container.supervisor_service.delete(supervisor_id)
        return ok(message="Supervisor removed")
