from __future__ import annotations

from flask import Flask

from ..common.auth import roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", endpoint="settings")
    def settings():
        # Branding and lists are needed before sign-in.
        return ok(container.settings_service.get().to_dict())

    @app.route("/api/settings", methods=["PATCH"], endpoint="update_settings")
    @roles_required(UserType.ADMIN)
    def update_settings():
        return ok(container.settings_service.update(json_body()).to_dict(), message="Settings saved")

    @app.route("/api/vendors", endpoint="vendors")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD, UserType.TEAM)
    def vendors():
        return ok([v.to_dict() for v in container.settings_service.get().vendors])

    @app.route("/api/vendors", methods=["POST"], endpoint="add_vendor")
    @roles_required(UserType.ADMIN)
    def add_vendor():
        return ok(container.settings_service.add_vendor(json_body()).to_dict(), status=201, message="Vendor added")

    @app.route("/api/vendors/<vendor_id>", methods=["PATCH"], endpoint="edit_vendor")
    @roles_required(UserType.ADMIN)
    def edit_vendor(vendor_id: str):
        vendor = container.settings_service.update_vendor(vendor_id, json_body())
        return ok(vendor.to_dict(), message="Vendor updated")

    @app.route("/api/vendors/<vendor_id>", methods=["DELETE"], endpoint="delete_vendor")
    @roles_required(UserType.ADMIN)
    def delete_vendor(vendor_id: str):
        container.settings_service.delete_vendor(vendor_id)
        return ok(message="Vendor removed")
