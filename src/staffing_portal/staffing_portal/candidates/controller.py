from __future__ import annotations

from flask import Flask, request, session

from ..common.auth import current_user_id, current_user_type, login_required, roles_required
from ..common.datetime_utils import now_local
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container
from ..reports.pipeline import interview_summary, kanban_board, recruiter_stage_counts
from ..reports.team import downline_names
from .filters import CandidateFilter, Viewer, application_counts, apply_filters, filter_options, visible_to
from .service import TransferRequest

_RECRUITING = (UserType.ADMIN, UserType.HR, UserType.TEAMLEAD, UserType.TEAM)


def session_viewer(container: Container) -> Viewer:
    """Who is asking, as the candidate visibility rules see it."""
    user_type = current_user_type()
    names: frozenset[str] = frozenset()
    if user_type == UserType.TEAMLEAD:
        names = downline_names(container.user_service.list_team_members(), current_user_id())
    return Viewer(
        user_type=user_type,
        full_name=session.get("name", ""),
        email=session.get("email", ""),
        recruiter_names=names,
    )


def register(app: Flask, container: Container) -> None:
    def visible():
        return visible_to(container.candidate_service.list_candidates(), session_viewer(container))

    @app.route("/api/candidates", endpoint="candidates")
    @login_required
    def candidates():
        items = visible()
        flt = CandidateFilter.from_args(request.args)
        return ok(
            {
                "candidates": apply_filters(items, flt, today=now_local().date()),
                "application_counts": application_counts(items),
                "options": filter_options(items),
            }
        )

    @app.route("/api/candidates/daily-lineup", endpoint="daily_lineup")
    @roles_required(*_RECRUITING)
    def daily_lineup():
        args = request.args.to_dict()
        args["daily_lineup"] = "true"
        return ok(apply_filters(visible(), CandidateFilter.from_args(args), today=now_local().date()))

    @app.route("/api/candidates/kanban", endpoint="kanban")
    @roles_required(*_RECRUITING)
    def kanban():
        items = visible()
        return ok(
            {
                "board": kanban_board(items, today=now_local().date()),
                "recruiters": recruiter_stage_counts(items),
            }
        )

    @app.route("/api/candidates/interviews", endpoint="interviews")
    @roles_required(*_RECRUITING, UserType.PARTNER, UserType.STORE_SUPERVISOR)
    def interviews():
        return ok(interview_summary(visible(), today=now_local().date()))

    @app.route("/api/candidates/<candidate_id>", endpoint="candidate_detail")
    @roles_required(*_RECRUITING)
    def candidate_detail(candidate_id: str):
        return ok(container.candidate_service.get(candidate_id))

    @app.route("/api/candidates", methods=["POST"], endpoint="add_lineup")
    @roles_required(*_RECRUITING)
    def add_lineup():
        result = container.candidate_service.create_lineup(json_body(), recruiter=session.get("name", ""))
        message = "Candidate updated with new lineup" if result.updated else "Candidate added"
        return ok(result.candidate, status=200 if result.updated else 201, message=message)

    @app.route("/api/candidates/<candidate_id>", methods=["PATCH"], endpoint="edit_candidate")
    @roles_required(*_RECRUITING)
    def edit_candidate(candidate_id: str):
        return ok(container.candidate_service.update(candidate_id, json_body()), message="Candidate updated")

    @app.route("/api/candidates/<candidate_id>", methods=["DELETE"], endpoint="delete_candidate")
    @roles_required(UserType.ADMIN, UserType.HR)
    def delete_candidate(candidate_id: str):
        container.candidate_service.delete(candidate_id)
        return ok(message="Candidate deleted")

    @app.route("/api/candidates/<candidate_id>/stage", methods=["POST"], endpoint="move_candidate")
    @roles_required(*_RECRUITING)
    def move_candidate(candidate_id: str):
        stage = json_body().get("stage", "")
        return ok(container.candidate_service.move_stage(candidate_id, stage), message=f"Moved to {stage}")

    @app.route("/api/candidates/<candidate_id>/transfer", methods=["POST"], endpoint="transfer_candidate")
    @roles_required(*_RECRUITING)
    def transfer_candidate(candidate_id: str):
        payload = json_body()
        req = TransferRequest(
            vendor=payload.get("vendor", ""),
            role=payload.get("role", ""),
            location=payload.get("location", ""),
            store_location=payload.get("store_location", ""),
            call_status=payload.get("call_status") or "Applied",
            partner_name=payload.get("partner_name"),
            interview_date=payload.get("interview_date"),
            interview_details=payload.get("interview_details"),
        )
        candidate = container.candidate_service.transfer(candidate_id, req)
        app.logger.info("Candidate %s transferred by %s", candidate_id, current_user_id())
        return ok(candidate, message="Candidate transferred")

    @app.route("/api/candidates/<candidate_id>/quit", methods=["POST"], endpoint="quit_candidate")
    @roles_required(*_RECRUITING)
    def quit_candidate(candidate_id: str):
        quit_date = json_body().get("quit_date")
        return ok(container.candidate_service.mark_quit(candidate_id, quit_date), message="Marked as quit")

    @app.route("/api/applications", methods=["POST"], endpoint="apply")
    @roles_required(UserType.CANDIDATE)
    def apply():
        payload = dict(json_body())
        payload.setdefault("email", session.get("email"))
        candidate = container.candidate_service.submit_application(payload, user_id=current_user_id())
        return ok(candidate, status=201, message="Application submitted")

    @app.route("/api/applications/mine", endpoint="my_applications")
    @roles_required(UserType.CANDIDATE)
    def my_applications():
        user_id = current_user_id()
        return ok([c for c in container.candidate_service.list_candidates() if c.user_id == user_id])
