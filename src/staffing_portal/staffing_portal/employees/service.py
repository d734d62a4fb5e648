from __future__ import annotations

import logging
import threading
from dataclasses import fields
from typing import Any, Mapping

from ..candidates.repository import CandidateRepository
from ..common.datetime_utils import now_local
from ..core.enums import CandidateStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_EDITABLE = {f.name for f in fields(Employee)} - {"id", "candidate_id"}


def is_selected(candidate) -> bool:
    return candidate.stage in ("Selected", "Joined") or candidate.status in ("Selected", "Joined")


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, candidates: CandidateRepository):
        self._employees = employees
        self._candidates = candidates
        self._id_lock = threading.Lock()

    def list_employees(self) -> list[Employee]:
        return self._employees.query(order_by="id", descending=True)

    def onboarding_candidates(self) -> list:
        """Selected candidates that are not employees yet."""
        onboarded = {e.candidate_id for e in self._employees.all() if e.candidate_id}
        return [c for c in self._candidates.list_all() if is_selected(c) and c.id not in onboarded]

    def onboard(self, candidate_id: str, payload: Mapping[str, Any]) -> Employee:
        candidate = self._candidates.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate does not exist")
        if not is_selected(candidate):
            raise ValidationError("Only selected candidates can be onboarded")
        if self._employees.first(candidate_id=candidate_id):
            raise ValidationError("Candidate is already an employee")

        extra = {k: v for k, v in payload.items() if k in _EDITABLE}
        base = {
            "name": candidate.name,
            "email": candidate.email,
            "phone": candidate.phone,
            "role": candidate.role,
            "vendor": candidate.vendor,
            "gross_salary": candidate.gross_salary,
            "date_of_joining": candidate.joining_date or now_local().date().isoformat(),
        }
        base.update(extra)

        with self._id_lock:
            employee_id = self._employees.next_id()
            employee = self._employees.put(employee_id, Employee(candidate_id=candidate_id, **base))

        self._candidates.update(candidate_id, {"status": CandidateStatus.ONBOARDING.value})
        logger.info("Candidate %s onboarded as %s", candidate_id, employee_id)
        return employee

    def update(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        if not self._employees.get(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        clean = {k: v for k, v in changes.items() if k in _EDITABLE}
        if not clean:
            raise ValidationError("Nothing to update")
        return self._employees.update(employee_id, clean)
