"""CTC (cost to company) breakdowns.

Employer PF is 12 % of basic; ESI (0.75 % employee, 3.25 % employer, on gross)
only applies below the statutory wage ceiling.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

from ..common.validators import to_float
from ..core.constants import (
    EMPLOYEE_ESI_RATE,
    EMPLOYER_ESI_RATE,
    ESI_ANNUAL_CTC_LIMIT,
    ESI_MONTHLY_GROSS_LIMIT,
    NET_TO_GROSS_MAX_ITERATIONS,
    NET_TO_GROSS_TOLERANCE,
    PF_RATE,
)


@dataclass(frozen=True)
class SalaryRule:
    designation: str = "Default"
    basic_percentage: float = 40.0  # of gross
    hra_percentage: float = 50.0  # of basic
    conveyance: float = 0.0  # monthly
    medical: float = 0.0
    statutory_bonus: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SalaryRule":
        return cls(
            designation=str(data.get("designation") or "Default"),
            basic_percentage=to_float(data.get("basic_percentage"), 40.0),
            hra_percentage=to_float(data.get("hra_percentage"), 50.0),
            conveyance=to_float(data.get("conveyance")),
            medical=to_float(data.get("medical")),
            statutory_bonus=to_float(data.get("statutory_bonus")),
        )


DEFAULT_RULE = SalaryRule()


@dataclass(frozen=True)
class SalaryComponents:
    basic: float = 0.0
    hra: float = 0.0
    conveyance: float = 0.0
    medical: float = 0.0
    statutory_bonus: float = 0.0
    special_allowance: float = 0.0
    gross: float = 0.0
    employee_pf: float = 0.0
    employee_esi: float = 0.0
    total_deductions: float = 0.0
    net_salary: float = 0.0
    employer_pf: float = 0.0
    employer_esi: float = 0.0
    ctc: float = 0.0

    def scaled(self, factor: float) -> "SalaryComponents":
        return SalaryComponents(**{f.name: getattr(self, f.name) * factor for f in fields(self)})

    def rounded(self) -> dict[str, float]:
        return {k: round(v, 2) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class CTCBreakdown:
    monthly: SalaryComponents
    annual: SalaryComponents


EMPTY_BREAKDOWN = CTCBreakdown(monthly=SalaryComponents(), annual=SalaryComponents())


def _components(gross: float, rule: SalaryRule, *, esi: bool, allowance_months: int) -> SalaryComponents:
    """Earnings and deductions for one period; fixed allowances are monthly amounts."""
    basic = gross * rule.basic_percentage / 100
    hra = basic * rule.hra_percentage / 100
    conveyance = rule.conveyance * allowance_months
    medical = rule.medical * allowance_months
    statutory_bonus = rule.statutory_bonus * allowance_months
    special = max(0.0, gross - basic - hra - conveyance - medical - statutory_bonus)

    employee_pf = basic * PF_RATE
    employee_esi = gross * EMPLOYEE_ESI_RATE if esi else 0.0
    employer_pf = basic * PF_RATE
    employer_esi = gross * EMPLOYER_ESI_RATE if esi else 0.0
    total_deductions = employee_pf + employee_esi

    return SalaryComponents(
        basic=basic,
        hra=hra,
        conveyance=conveyance,
        medical=medical,
        statutory_bonus=statutory_bonus,
        special_allowance=special,
        gross=gross,
        employee_pf=employee_pf,
        employee_esi=employee_esi,
        total_deductions=total_deductions,
        net_salary=gross - total_deductions,
        employer_pf=employer_pf,
        employer_esi=employer_esi,
        ctc=gross + employer_pf + employer_esi,
    )


def calculate_breakdown_from_rule(annual_ctc: Any, rule: Optional[SalaryRule] = None) -> CTCBreakdown:
    ctc = to_float(annual_ctc)
    if ctc <= 0:
        return EMPTY_BREAKDOWN

    rule = rule or DEFAULT_RULE
    esi = ctc <= ESI_ANNUAL_CTC_LIMIT
    # CTC = gross + employer PF (12 % of basic) + employer ESI
    multiplier = 1 + PF_RATE * rule.basic_percentage / 100 + (EMPLOYER_ESI_RATE if esi else 0)
    annual = _components(ctc / multiplier, rule, esi=esi, allowance_months=12)
    # ctc stays the requested figure.
    annual = SalaryComponents(**{**asdict(annual), "ctc": ctc})
    return CTCBreakdown(monthly=annual.scaled(1 / 12), annual=annual)


def calculate_ctc_from_net_salary(monthly_net: Any, rule: Optional[SalaryRule] = None) -> CTCBreakdown:
    net = to_float(monthly_net)
    if net <= 0:
        return EMPTY_BREAKDOWN

    rule = rule or DEFAULT_RULE
    gross = net * 1.25
    for _ in range(NET_TO_GROSS_MAX_ITERATIONS):
        basic = gross * rule.basic_percentage / 100
        esi = gross * EMPLOYEE_ESI_RATE if gross <= ESI_MONTHLY_GROSS_LIMIT else 0.0
        calculated = gross - basic * PF_RATE - esi
        if abs(calculated - net) < NET_TO_GROSS_TOLERANCE:
            break
        gross = gross * (net / calculated)

    monthly = _components(gross, rule, esi=gross <= ESI_MONTHLY_GROSS_LIMIT, allowance_months=1)
    return CTCBreakdown(monthly=monthly, annual=monthly.scaled(12))
