from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import optional_str, require_non_empty
from ..core.enums import ResignationStatus, UserType
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Resignation
from .repository import ResignationRepository

logger = logging.getLogger(__name__)

_DECIDERS = frozenset({UserType.ADMIN, UserType.HR})


def _parse_day(value: str, label: str) -> date:
    try:
        return parse_iso_date(require_non_empty(value, label))
    except ValueError:
        raise ValidationError(f"{label} must be in YYYY-MM-DD format")


class ResignationService:
    def __init__(self, resignations: ResignationRepository):
        self._resignations = resignations

    def submit(self, *, employee_id: str, employee_name: Optional[str], reason: str) -> Resignation:
        pending = [r for r in self._resignations.list_for_employee(employee_id) if r.status == ResignationStatus.PENDING]
        if pending:
            raise ValidationError("You already have a resignation awaiting approval")
        created = self._resignations.add(
            Resignation(
                employee_id=employee_id,
                employee_name=employee_name,
                reason=require_non_empty(reason, "Reason"),
                submitted_date=now_local().isoformat(),
                status=ResignationStatus.PENDING,
            )
        )
        logger.info("Resignation %s submitted by %s", created.id, employee_id)
        return created

    def list_for_employee(self, employee_id: str) -> list[Resignation]:
        return self._resignations.list_for_employee(employee_id)

    def list_all(self) -> list[Resignation]:
        return self._resignations.list_latest()

    def _pending(self, current_type: UserType, resignation_id: str) -> Resignation:
        if current_type not in _DECIDERS:
            raise AuthorizationError("Only HR can review resignations")
        res = self._resignations.require(resignation_id)
        if res.status != ResignationStatus.PENDING:
            raise ValidationError("Resignation has already been processed")
        return res

    def approve(
        self,
        *,
        current_type: UserType,
        resignation_id: str,
        notice_period_start_date: str,
        last_working_day: str,
        hr_remarks: str = "",
    ) -> Resignation:
        self._pending(current_type, resignation_id)
        start = _parse_day(notice_period_start_date, "Notice period start date")
        last = _parse_day(last_working_day, "Last working day")
        if last < start:
            raise ValidationError("Last working day cannot be before the notice period starts")
        return self._resignations.update(
            resignation_id,
            {
                "status": ResignationStatus.APPROVED,
                "notice_period_start_date": start.isoformat(),
                "last_working_day": last.isoformat(),
                "hr_remarks": optional_str(hr_remarks),
            },
        )

    def reject(self, *, current_type: UserType, resignation_id: str, hr_remarks: str) -> Resignation:
        self._pending(current_type, resignation_id)
        return self._resignations.update(
            resignation_id,
            {"status": ResignationStatus.REJECTED, "hr_remarks": require_non_empty(hr_remarks, "Remarks")},
        )
