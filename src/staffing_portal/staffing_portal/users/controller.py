from __future__ import annotations

from datetime import timedelta

from flask import Flask, session

from ..common.auth import current_user_id, current_user_type, login_required, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    session_days = int(app.config.get("SESSION_DAYS", 7))

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        payload = json_body()
        s_user = container.auth_service.authenticate(payload.get("email", ""), payload.get("password", ""))

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=session_days)

        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        session["name"] = s_user.full_name
        session["user_type"] = s_user.user_type.value

        app.logger.info("User %s signed in as %s", s_user.user_id, s_user.user_type.value)
        return ok(s_user, message="Signed in")

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Signed out")

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return ok(container.user_service.get(current_user_id()).public())

    @app.route("/api/profile", methods=["PATCH"], endpoint="update_profile")
    @login_required
    def update_profile():
        user = container.user_service.update_own_profile(current_user_id(), json_body())
        session["name"] = user.display_name
        return ok(user.public(), message="Profile updated")

    @app.route("/api/team", endpoint="team_members")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD)
    def team_members():
        return ok([u.public() for u in container.user_service.list_team_members()])

    @app.route("/api/team", methods=["POST"], endpoint="add_team_member")
    @roles_required(UserType.ADMIN)
    def add_team_member():
        payload = json_body()
        user = container.user_service.create_team_member(
            current_type=current_user_type(),
            email=payload.get("email", ""),
            password=payload.get("password", ""),
            user_type=payload.get("user_type", UserType.TEAM.value),
            full_name=payload.get("full_name", ""),
            phone=payload.get("phone", ""),
            role=payload.get("role", ""),
            reporting_manager=payload.get("reporting_manager", ""),
            salary=payload.get("salary"),
        )
        return ok(user.public(), status=201, message="Team member added")

    @app.route("/api/team/<user_id>", methods=["PATCH"], endpoint="edit_team_member")
    @roles_required(UserType.ADMIN)
    def edit_team_member(user_id: str):
        user = container.user_service.update_profile(user_id, json_body())
        return ok(user.public(), message="Team member updated")

    @app.route("/api/team/<user_id>", methods=["DELETE"], endpoint="delete_team_member")
    @roles_required(UserType.ADMIN)
    def delete_team_member(user_id: str):
        container.user_service.delete_team_member(current_type=current_user_type(), user_id=user_id)
        return ok(message="Team member removed")
