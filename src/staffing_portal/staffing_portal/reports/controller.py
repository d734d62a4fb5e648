from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, request, session

from ..common.auth import current_user_id, current_user_type, roles_required
from ..common.datetime_utils import now_local, parse_iso_date
from ..common.responses import ok
from ..core.enums import UserType
from ..core.exceptions import ValidationError
from ..container import Container
from .dashboard import admin_dashboard, partner_dashboard, pipeline_stats
from .pipeline import recruiter_performance, selection_pipeline
from .requirements import merge_openings, requirement_breakdown
from .team import downline, team_performance


def _date_arg(name: str) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"Invalid {name} date, expected YYYY-MM-DD")


def register(app: Flask, container: Container) -> None:
    def openings():
        return merge_openings(
            container.requirement_service.list_requirements(),
            container.job_service.list_jobs(),
            container.settings_service.get().vendors,
        )

    def performance():
        return team_performance(
            container.user_service.list_team_members(), container.candidate_service.list_candidates()
        )

    @app.route("/api/dashboard/admin", endpoint="admin_dashboard")
    @roles_required(UserType.ADMIN, UserType.HR)
    def admin_dashboard_view():
        rows = performance()
        return ok(
            admin_dashboard(
                candidates=container.candidate_service.list_candidates(),
                tickets=container.complaint_service.list_tickets(),
                openings=openings(),
                vendors=container.settings_service.get().vendors,
                team=rows,
                team_names=[r.team_member for r in rows],
                now=now_local(),
            )
        )

    @app.route("/api/dashboard/partner", endpoint="partner_dashboard")
    @roles_required(UserType.PARTNER)
    def partner_dashboard_view():
        stats = partner_dashboard(
            session.get("email", ""),
            container.settings_service.get().vendors,
            container.requirement_service.list_requirements(),
            container.candidate_service.list_candidates(),
        )
        if stats is None:
            return ok(message="No vendor is registered for this partner account")
        return ok(stats)

    @app.route("/api/dashboard/recruiter", endpoint="recruiter_dashboard")
    @roles_required(UserType.TEAM, UserType.TEAMLEAD)
    def recruiter_dashboard_view():
        name = session.get("name", "")
        mine = [c for c in container.candidate_service.list_candidates() if c.recruiter == name]
        return ok({"pipeline": pipeline_stats(mine), "total": len(mine)})

    @app.route("/api/reports/team-performance", endpoint="team_performance")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD)
    def team_performance_view():
        rows = performance()
        if current_user_type() == UserType.TEAMLEAD:
            rows = downline(rows, current_user_id())
        return ok(rows)

    @app.route("/api/reports/revenue", endpoint="revenue")
    @roles_required(UserType.ADMIN)
    def revenue_view():
        return ok(
            container.revenue_calculator.summary(
                performance(),
                container.user_service.list_team_members(),
                container.candidate_service.list_candidates(),
                container.settings_service.get().vendors,
            )
        )

    @app.route("/api/reports/selection-pipeline", endpoint="selection_pipeline")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD)
    def selection_pipeline_view():
        return ok(
            selection_pipeline(
                container.candidate_service.list_candidates(), start=_date_arg("start"), end=_date_arg("end")
            )
        )

    @app.route("/api/reports/recruiters", endpoint="recruiter_performance")
    @roles_required(UserType.ADMIN, UserType.HR, UserType.TEAMLEAD)
    def recruiter_performance_view():
        return ok(
            recruiter_performance(
                container.user_service.list_team_members(),
                container.candidate_service.list_candidates(),
                start=_date_arg("start"),
                end=_date_arg("end"),
            )
        )

    @app.route("/api/reports/requirements", endpoint="requirement_breakdown")
    @roles_required(UserType.ADMIN, UserType.HR)
    def requirement_breakdown_view():
        return ok(requirement_breakdown(openings(), [r.team_member for r in performance()]))
