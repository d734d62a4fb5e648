from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from ..common.validators import require_non_empty
from ..core.enums import CommissionType
from ..core.exceptions import NotFoundError, ValidationError
from ..documents.store import new_doc_id
from .model import AppSettings, Vendor
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

DEFAULT_BRANDING: dict[str, Any] = {
    "portal_name": "Staffing Portal",
    "hire_talent": {
        "title": "Hire Top Talent",
        "description": "Post your job openings and find the perfect candidates for your business.",
        "link": "",
        "background_image": None,
    },
    "become_partner": {
        "title": "Become a Partner",
        "description": "Expand your business by collaborating with us and accessing our network.",
        "link": "",
        "background_image": None,
    },
}

DEFAULT_PANEL_CONFIG: dict[str, Any] = {"email_notifications": True, "maintenance_mode": False}

SETTINGS_KEYS = frozenset(
    {"branding", "logo_src", "vendors", "job_roles", "system_roles", "locations", "stores", "panel_config"}
)


def merge_with_defaults(saved: Mapping[str, Any]) -> AppSettings:
    """Stored values win; branding is merged key by key, missing pieces fall back to defaults."""
    branding = copy.deepcopy(DEFAULT_BRANDING)
    branding.update(saved.get("branding") or {})
    return AppSettings(
        branding=branding,
        logo_src=saved.get("logo_src") or None,
        vendors=tuple(Vendor.from_dict(v) for v in saved.get("vendors") or ()),
        job_roles=tuple(saved.get("job_roles") or ()),
        system_roles=tuple(saved.get("system_roles") or ()),
        locations=tuple(saved.get("locations") or ()),
        stores=tuple(saved.get("stores") or ()),
        panel_config=dict(saved.get("panel_config") or DEFAULT_PANEL_CONFIG),
    )


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> AppSettings:
        return merge_with_defaults(self._settings.load())

    def update(self, changes: Mapping[str, Any]) -> AppSettings:
        unknown = set(changes) - SETTINGS_KEYS
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(sorted(unknown))}")
        if not changes:
            raise ValidationError("Nothing to update")
        payload = dict(changes)
        if "vendors" in payload:
            payload["vendors"] = [Vendor.from_dict(v).to_dict() for v in payload["vendors"] or ()]
        self._settings.merge(payload)
        logger.info("Settings updated: %s", ", ".join(sorted(payload)))
        return self.get()

    def _validate_vendor(self, data: Mapping[str, Any], vendor_id: str) -> Vendor:
        require_non_empty(data.get("partner_name"), "Partner name")
        try:
            CommissionType(data.get("commission_type") or CommissionType.PERCENTAGE.value)
        except ValueError:
            raise ValidationError("Invalid commission type")
        return Vendor.from_dict({**data, "id": vendor_id})

    def _save_vendors(self, vendors: list[Vendor]) -> None:
        self._settings.merge({"vendors": [v.to_dict() for v in vendors]})

    def add_vendor(self, data: Mapping[str, Any]) -> Vendor:
        vendor = self._validate_vendor(data, new_doc_id())
        vendors = list(self.get().vendors)
        vendors.append(vendor)
        self._save_vendors(vendors)
        logger.info("Vendor %s added", vendor.partner_name)
        return vendor

    def update_vendor(self, vendor_id: str, data: Mapping[str, Any]) -> Vendor:
        vendors = list(self.get().vendors)
        for i, current in enumerate(vendors):
            if current.id == vendor_id:
                vendors[i] = self._validate_vendor({**current.to_dict(), **data}, vendor_id)
                self._save_vendors(vendors)
                return vendors[i]
        raise NotFoundError("Vendor does not exist")

    def delete_vendor(self, vendor_id: str) -> None:
        vendors = list(self.get().vendors)
        remaining = [v for v in vendors if v.id != vendor_id]
        if len(remaining) == len(vendors):
            raise NotFoundError("Vendor does not exist")
        self._save_vendors(remaining)
