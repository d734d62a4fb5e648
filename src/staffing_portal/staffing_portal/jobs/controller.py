from __future__ import annotations

from flask import Flask

from ..common.auth import current_user_id, roles_required
from ..common.responses import json_body, ok
from ..core.enums import UserType
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/jobs", endpoint="jobs")
    def jobs():
        return ok(container.job_service.list_jobs())

    @app.route("/api/jobs/board", endpoint="job_board")
    def job_board():
        # Admin-posted jobs plus approved partner requirements.
        postings = container.job_service.list_jobs() + container.requirement_service.approved_job_postings()
        postings.sort(key=lambda j: j.posted_date or "", reverse=True)
        return ok(postings)

    @app.route("/api/jobs/<job_id>", endpoint="job_detail")
    def job_detail(job_id: str):
        return ok(container.job_service.get(job_id))

    @app.route("/api/jobs", methods=["POST"], endpoint="add_job")
    @roles_required(UserType.ADMIN, UserType.HR)
    def add_job():
        job = container.job_service.create(json_body(), admin_id=current_user_id())
        return ok(job, status=201, message="Job posted")

    @app.route("/api/jobs/<job_id>", methods=["PATCH"], endpoint="edit_job")
    @roles_required(UserType.ADMIN, UserType.HR)
    def edit_job(job_id: str):
        return ok(container.job_service.update(job_id, json_body()), message="Job updated")

    @app.route("/api/jobs/<job_id>", methods=["DELETE"], endpoint="delete_job")
    @roles_required(UserType.ADMIN, UserType.HR)
    def delete_job(job_id: str):
        container.job_service.delete(job_id)
        return ok(message="Job deleted")
