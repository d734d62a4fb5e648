from __future__ import annotations

from ..core.constants import EMPLOYEE_ID_PREFIX
from ..documents.collection import DocumentCollection
from .model import Employee


class EmployeeRepository(DocumentCollection[Employee]):
    name = "employees"
    model = Employee

    def next_id(self) -> str:
        numbers = []
        for employee in self.all():
            suffix = employee.id[len(EMPLOYEE_ID_PREFIX):]
            if employee.id.startswith(EMPLOYEE_ID_PREFIX) and suffix.isdigit():
                numbers.append(int(suffix))
        return f"{EMPLOYEE_ID_PREFIX}{(max(numbers) + 1 if numbers else 1):03d}"
