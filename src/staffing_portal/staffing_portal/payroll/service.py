from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.validators import require_non_empty, to_float
from ..core.exceptions import NotFoundError, ValidationError
from .ctc import CTCBreakdown, SalaryRule, calculate_breakdown_from_rule, calculate_ctc_from_net_salary
from .repository import SalaryRuleRepository

logger = logging.getLogger(__name__)


class SalaryRuleService:
    def __init__(self, rules: SalaryRuleRepository):
        self._rules = rules

    def list_rules(self) -> list[SalaryRule]:
        return self._rules.list_rules()

    def save_rule(self, payload: Mapping[str, Any]) -> SalaryRule:
        """Create or replace the rule for a designation."""
        require_non_empty(payload.get("designation"), "Designation")
        rule = SalaryRule.from_dict(payload)
        if not 0 < rule.basic_percentage <= 100:
            raise ValidationError("Basic must be between 0 and 100 % of gross")
        if not 0 <= rule.hra_percentage <= 100:
            raise ValidationError("HRA must be between 0 and 100 % of basic")
        if min(rule.conveyance, rule.medical, rule.statutory_bonus) < 0:
            raise ValidationError("Allowances cannot be negative")
        saved = self._rules.save_rule(rule)
        logger.info("Salary rule saved for %s", saved.designation)
        return saved

    def delete_rule(self, designation: str) -> None:
        if not self._rules.delete(designation):
            raise NotFoundError("No salary rule for this designation")

    def _rule_for(self, designation: Optional[str]) -> Optional[SalaryRule]:
        return self._rules.get_rule(designation) if designation else None

    def breakdown_from_ctc(self, annual_ctc: Any, designation: Optional[str] = None) -> CTCBreakdown:
        if to_float(annual_ctc) < 0:
            raise ValidationError("CTC cannot be negative")
        return calculate_breakdown_from_rule(annual_ctc, self._rule_for(designation))

    def breakdown_from_net(self, monthly_net: Any, designation: Optional[str] = None) -> CTCBreakdown:
        if to_float(monthly_net) < 0:
            raise ValidationError("Net salary cannot be negative")
        return calculate_ctc_from_net_salary(monthly_net, self._rule_for(designation))
