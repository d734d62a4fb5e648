from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..documents.collection import DocumentCollection
from .ctc import SalaryRule


@dataclass(frozen=True)
class SalaryRuleRecord:
    id: str = ""
    designation: str = ""
    basic_percentage: float = 40.0
    hra_percentage: float = 50.0
    conveyance: float = 0.0
    medical: float = 0.0
    statutory_bonus: float = 0.0

    def to_rule(self) -> SalaryRule:
        return SalaryRule(
            designation=self.designation,
            basic_percentage=self.basic_percentage,
            hra_percentage=self.hra_percentage,
            conveyance=self.conveyance,
            medical=self.medical,
            statutory_bonus=self.statutory_bonus,
        )


class SalaryRuleRepository(DocumentCollection[SalaryRuleRecord]):
    """Rules keyed by designation (the document id)."""

    name = "salaryRules"
    model = SalaryRuleRecord

    def list_rules(self) -> list[SalaryRule]:
        return [r.to_rule() for r in self.query(order_by="designation")]

    def get_rule(self, designation: str) -> Optional[SalaryRule]:
        record = self.get(designation)
        return record.to_rule() if record else None

    def save_rule(self, rule: SalaryRule) -> SalaryRule:
        record = SalaryRuleRecord(
            designation=rule.designation,
            basic_percentage=rule.basic_percentage,
            hra_percentage=rule.hra_percentage,
            conveyance=rule.conveyance,
            medical=rule.medical,
            statutory_bonus=rule.statutory_bonus,
        )
        return self.put(rule.designation, record).to_rule()
