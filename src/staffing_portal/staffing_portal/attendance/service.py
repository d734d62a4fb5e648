from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional

from ..candidates.repository import CandidateRepository
from ..common.datetime_utils import days_in_month, now_local, parse_iso_date, parse_month
from ..common.validators import require_non_empty, to_int
from ..core.enums import StoreAttendanceStatus, WorkShiftStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..payroll.calculator.base import PayCalculator
from ..payroll.calculator.prorated_calculator import ProratedPayCalculator
from .model import MonthlyAttendance, MonthlyAttendanceRow, StoreAttendance, StoreEmployee, WorkShift
from .repository import MonthlyAttendanceRepository, StoreAttendanceRepository, WorkShiftRepository

logger = logging.getLogger(__name__)


def _month_length(month: str) -> int:
    try:
        year, mon = parse_month(month)
    except ValueError:
        raise ValidationError("Month must be in YYYY-MM format")
    return days_in_month(year, mon)


def _parse_day(value: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError("Date must be in YYYY-MM-DD format")


class AttendanceService:
    """Monthly vendor attendance and the prorated commission it pays out."""

    def __init__(self, records: MonthlyAttendanceRepository, *, calculator: Optional[PayCalculator] = None):
        self._records = records
        self._calculator = calculator or ProratedPayCalculator()

    def _row(self, record: MonthlyAttendance) -> MonthlyAttendanceRow:
        dim = _month_length(record.month)
        return MonthlyAttendanceRow(
            record=record,
            days_in_month=dim,
            payable=self._calculator.payable(record.base_commission, record.days_present, dim),
        )

    def list_month(self, month: str) -> list[MonthlyAttendanceRow]:
        _month_length(month)
        return [self._row(r) for r in self._records.list_for_month(month)]

    def add_record(
        self,
        *,
        month: str,
        candidate_name: str,
        vendor: Optional[str] = None,
        role: Optional[str] = None,
        base_commission: Any = None,
        candidate_id: Optional[str] = None,
    ) -> MonthlyAttendanceRow:
        _month_length(month)
        base = None
        if base_commission not in (None, ""):
            try:
                base = float(base_commission)
            except (TypeError, ValueError):
                raise ValidationError("Base commission must be a number")
        record = self._records.add(
            MonthlyAttendance(
                candidate_id=candidate_id,
                candidate_name=require_non_empty(candidate_name, "Candidate name"),
                vendor=vendor,
                role=role,
                base_commission=base,
                days_present=0,
                month=month,
                last_saved=now_local().isoformat(),
            )
        )
        return self._row(record)

    def save_days_present(self, record_id: str, days_present: Any) -> MonthlyAttendanceRow:
        record = self._records.require(record_id)
        dim = _month_length(record.month)
        days = to_int(days_present)
        if days is None or not 0 <= days <= dim:
            raise ValidationError(f"Days present must be between 0 and {dim}")
        updated = self._records.update(record_id, {"days_present": days, "last_saved": now_local().isoformat()})
        logger.info("Saved %d days for attendance %s (%s)", days, record_id, record.month)
        return self._row(updated)


class StoreAttendanceService:
    """Daily attendance a store supervisor marks for the employees placed at their store.

    Store employees are the joined candidates assigned to the supervisor.
    """

    def __init__(self, records: StoreAttendanceRepository, candidates: CandidateRepository):
        self._records = records
        self._candidates = candidates

    def store_employees(self, supervisor_email: str) -> list[StoreEmployee]:
        rows = [
            c
            for c in self._candidates.list_all()
            if c.supervisor_email == supervisor_email and (c.status == "Joined" or c.stage == "Joined")
        ]
        rows.sort(key=lambda c: (c.name or "").casefold())
        return [
            StoreEmployee(id=c.id, name=c.name, role=c.role, phone=c.phone, joining_date=c.joining_date)
            for c in rows
        ]

    def attendance_for_date(self, supervisor_email: str, day: str) -> dict[str, StoreAttendanceStatus]:
        _parse_day(day)
        marked = {r.employee_id: r.status for r in self._records.list_for_date(day)}
        return {e.id: marked.get(e.id, StoreAttendanceStatus.ABSENT) for e in self.store_employees(supervisor_email)}

    def save_day(self, supervisor_email: str, day: str, statuses: Mapping[str, str]) -> list[StoreAttendance]:
        """Write one record per store employee; anyone not listed is Absent."""
        _parse_day(day)
        employees = self.store_employees(supervisor_email)
        known = {e.id for e in employees}
        unknown = set(statuses) - known
        if unknown:
            raise ValidationError("Attendance submitted for employees outside this store")

        saved: list[StoreAttendance] = []
        for employee in employees:
            raw = statuses.get(employee.id, StoreAttendanceStatus.ABSENT.value)
            try:
                status = StoreAttendanceStatus(raw)
            except ValueError:
                raise ValidationError(f"Invalid attendance status: {raw}")
            record = StoreAttendance(
                employee_id=employee.id, date=day, status=status, supervisor_email=supervisor_email
            )
            saved.append(self._records.put(self._records.doc_id_for(employee.id, day), record))
        logger.info("Saved store attendance for %s on %s (%d employees)", supervisor_email, day, len(saved))
        return saved

    def daily_summary(self, supervisor_email: str, day: str) -> dict[str, int]:
        summary = {s.value: 0 for s in StoreAttendanceStatus}
        for status in self.attendance_for_date(supervisor_email, day).values():
            summary[status.value] += 1
        return summary

    def monthly_sheet(self, supervisor_email: str, month: str) -> list[dict[str, Any]]:
        dim = _month_length(month)
        by_key = {(r.employee_id, r.date): r.status.value for r in self._records.list_for_month(month)}
        sheet = []
        for employee in self.store_employees(supervisor_email):
            days = {d: by_key.get((employee.id, f"{month}-{d:02d}")) for d in range(1, dim + 1)}
            sheet.append(
                {
                    "employee": employee,
                    "days": days,
                    "present": sum(1 for s in days.values() if s == StoreAttendanceStatus.PRESENT.value),
                }
            )
        return sheet


class ShiftService:
    """Clock in / clock out."""

    def __init__(self, shifts: WorkShiftRepository):
        self._shifts = shifts

    def active_shift(self, user_id: str) -> Optional[WorkShift]:
        return self._shifts.get_active(user_id)

    def start(self, user_id: str) -> WorkShift:
        if self._shifts.get_active(user_id):
            raise ValidationError("You already have an active shift")
        now = now_local()
        return self._shifts.add(
            WorkShift(
                user_id=user_id,
                start_time=now.isoformat(),
                end_time=None,
                date=now.date().isoformat(),
                status=WorkShiftStatus.ACTIVE,
            )
        )

    def end(self, user_id: str) -> WorkShift:
        shift = self._shifts.get_active(user_id)
        if not shift:
            raise NotFoundError("No active shift to end")
        return self._shifts.update(
            shift.id, {"end_time": now_local().isoformat(), "status": WorkShiftStatus.COMPLETED}
        )
