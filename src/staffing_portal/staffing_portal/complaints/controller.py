from __future__ import annotations

from flask import Flask, request, session

from ..common.auth import current_user_id, current_user_type, login_required, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/complaints", endpoint="complaints")
    @roles_required(UserType.ADMIN, UserType.HR)
    def complaints():
        status_filter = request.args.get("status", "All")
        return ok(
            {
                "tickets": container.complaint_service.list_tickets(status_filter),
                "summary": container.complaint_service.summary(),
            }
        )

    @app.route("/api/complaints/mine", endpoint="my_complaints")
    @login_required
    def my_complaints():
        return ok(container.complaint_service.list_for_user(current_user_id()))

    @app.route("/api/complaints", methods=["POST"], endpoint="add_complaint")
    @login_required
    def add_complaint():
        payload = json_body()
        ticket = container.complaint_service.create(
            submitted_by=session.get("name", ""),
            submitted_by_id=current_user_id(),
            user_type=current_user_type(),
            subject=payload.get("subject", ""),
            category=payload.get("category", "Other"),
            description=payload.get("description", ""),
        )
        return ok(ticket, status=201, message="Ticket submitted")

    @app.route("/api/complaints/<ticket_id>", methods=["PATCH"], endpoint="update_complaint")
    @roles_required(UserType.ADMIN, UserType.HR)
    def update_complaint(ticket_id: str):
        payload = json_body()
        ticket = container.complaint_service.update_status(
            ticket_id, payload.get("status", ""), payload.get("hr_remarks", "")
        )
        return ok(ticket, message="Ticket updated")
