from __future__ import annotations

from flask import Flask

from ..common.auth import roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/demo-requests", methods=["POST"], endpoint="request_demo")
    def request_demo():
        # Public form on the landing page.
        return ok(container.demo_request_service.create(json_body()), status=201, message="Request received")

    @app.route("/api/demo-requests", endpoint="demo_requests")
    @roles_required(UserType.ADMIN)
    def demo_requests():
        return ok(container.demo_request_service.list_requests())

    @app.route("/api/demo-requests/<request_id>", methods=["PATCH"], endpoint="update_demo_request")
    @roles_required(UserType.ADMIN)
    def update_demo_request(request_id: str):
        return ok(container.demo_request_service.update(request_id, json_body()), message="Request updated")
