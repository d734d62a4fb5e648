from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from ..core.enums import CommissionType


@dataclass(frozen=True)
class CommissionSlab:
    """Per-hire amount for a vendor whose hire count falls in [from, to].

    Bounds are kept as entered; a non-numeric ``to`` means "and above".
    """

    from_value: Any = ""
    to_value: Any = ""
    amount: Any = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CommissionSlab":
        return cls(from_value=data.get("from", ""), to_value=data.get("to", ""), amount=data.get("amount", 0))

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_value, "to": self.to_value, "amount": self.amount}


@dataclass(frozen=True)
class AttendanceRule:
    role: str = ""
    # 'Fresher', 'Experienced' or 'Any'
    experience_type: str = "Any"
    days: Any = 0
    amount: Any = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRule":
        return cls(
            role=data.get("role", ""),
            experience_type=data.get("experience_type", "Any"),
            days=data.get("days", 0),
            amount=data.get("amount", 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "experience_type": self.experience_type, "days": self.days, "amount": self.amount}


@dataclass(frozen=True)
class Vendor:
    id: str = ""
    brand_names: tuple[str, ...] = ()
    partner_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    location: Optional[str] = None
    # a stored type outside CommissionType is kept as the raw string
    commission_type: Union[CommissionType, str] = CommissionType.PERCENTAGE
    commission_value: Any = None
    commission_slabs: tuple[CommissionSlab, ...] = ()
    commission_attendance_rules: tuple[AttendanceRule, ...] = ()
    terms: Optional[str] = None
    status: str = "Active"

    def matches(self, name: Optional[str]) -> bool:
        """A candidate's vendor field may hold a brand or the partner name."""
        return bool(name) and (name in self.brand_names or self.partner_name == name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vendor":
        raw_type = data.get("commission_type") or CommissionType.PERCENTAGE.value
        try:
            commission_type = CommissionType(raw_type)
        except ValueError:
            commission_type = str(raw_type)
        return cls(
            id=str(data.get("id", "")),
            brand_names=tuple(data.get("brand_names") or ()),
            partner_name=data.get("partner_name") or "",
            email=data.get("email"),
            phone=data.get("phone"),
            address=data.get("address"),
            location=data.get("location"),
            commission_type=commission_type,
            commission_value=data.get("commission_value"),
            commission_slabs=tuple(CommissionSlab.from_dict(s) for s in data.get("commission_slabs") or ()),
            commission_attendance_rules=tuple(
                AttendanceRule.from_dict(r) for r in data.get("commission_attendance_rules") or ()
            ),
            terms=data.get("terms"),
            status=data.get("status") or "Active",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "brand_names": list(self.brand_names),
            "partner_name": self.partner_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "location": self.location,
            "commission_type": getattr(self.commission_type, "value", self.commission_type),
            "commission_value": self.commission_value,
            "commission_slabs": [s.to_dict() for s in self.commission_slabs],
            "commission_attendance_rules": [r.to_dict() for r in self.commission_attendance_rules],
            "terms": self.terms,
            "status": self.status,
        }


@dataclass(frozen=True)
class AppSettings:
    branding: dict[str, Any] = field(default_factory=dict)
    logo_src: Optional[str] = None
    vendors: tuple[Vendor, ...] = ()
    job_roles: tuple[str, ...] = ()
    system_roles: tuple[dict[str, Any], ...] = ()
    locations: tuple[str, ...] = ()
    stores: tuple[dict[str, Any], ...] = ()
    panel_config: dict[str, Any] = field(default_factory=dict)

    def find_vendor(self, name: Optional[str]) -> Optional[Vendor]:
        return next((v for v in self.vendors if v.matches(name)), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "branding": self.branding,
            "logo_src": self.logo_src,
            "vendors": [v.to_dict() for v in self.vendors],
            "job_roles": list(self.job_roles),
            "system_roles": list(self.system_roles),
            "locations": list(self.locations),
            "stores": list(self.stores),
            "panel_config": self.panel_config,
        }
