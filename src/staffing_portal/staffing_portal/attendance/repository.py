from __future__ import annotations

from typing import Optional

from ..core.enums import StoreAttendanceStatus, WorkShiftStatus
from ..documents.collection import DocumentCollection
from .model import MonthlyAttendance, StoreAttendance, WorkShift


class MonthlyAttendanceRepository(DocumentCollection[MonthlyAttendance]):
    name = "attendance"
    model = MonthlyAttendance
    converters = {"days_present": int}

    def list_for_month(self, month: str) -> list[MonthlyAttendance]:
        return self.query(where={"month": month}, order_by="candidate_name")


class StoreAttendanceRepository(DocumentCollection[StoreAttendance]):
    name = "storeAttendance"
    model = StoreAttendance
    converters = {"status": StoreAttendanceStatus}

    @staticmethod
    def doc_id_for(employee_id: str, day: str) -> str:
        # One record per employee per day.
        return f"{day}_{employee_id}"

    def list_for_date(self, day: str) -> list[StoreAttendance]:
        return self.query(where={"date": day})

    def list_for_month(self, month: str) -> list[StoreAttendance]:
        return [r for r in self.all() if r.date.startswith(month)]


class WorkShiftRepository(DocumentCollection[WorkShift]):
    name = "shifts"
    model = WorkShift
    converters = {"status": WorkShiftStatus}

    def get_active(self, user_id: str) -> Optional[WorkShift]:
        active = self.query(
            where={"user_id": user_id, "status": WorkShiftStatus.ACTIVE},
            order_by="start_time",
            descending=True,
            limit=1,
        )
        return active[0] if active else None
