from __future__ import annotations

import logging

from ..core.enums import CommissionType, UserType

logger = logging.getLogger(__name__)

DEMO_USERS = (
    # email, password, type, full name, reporting manager
    ("admin@portal.local", "admin123", UserType.ADMIN, "Admin Demo", ""),
    ("hr@portal.local", "hr1234", UserType.HR, "HR Demo", ""),
    ("lead@portal.local", "lead123", UserType.TEAMLEAD, "Lead Demo", "Admin"),
    ("recruiter@portal.local", "team123", UserType.TEAM, "Recruiter Demo", "Lead Demo"),
    ("partner@portal.local", "partner123", UserType.PARTNER, "Partner Demo", ""),
    ("supervisor@portal.local", "store123", UserType.STORE_SUPERVISOR, "Supervisor Demo", ""),
)

DEMO_SETTINGS = {
    "job_roles": ["Sales Executive", "Cashier", "Store Manager"],
    "locations": ["Bengaluru", "Chennai", "Hyderabad"],
    "stores": [{"name": "Central Mall", "location": "Bengaluru"}],
}

DEMO_VENDOR = {
    "brand_names": ["Demo Brand"],
    "partner_name": "Partner Demo",
    "email": "partner@portal.local",
    "commission_type": CommissionType.PERCENTAGE.value,
    "commission_value": "8.33",
}


def ensure_demo_data(container) -> None:
    """Create demo accounts and settings; existing records are left untouched."""
    users = container.user_service
    for email, password, user_type, full_name, manager in DEMO_USERS:
        if users.find_by_email(email):
            continue
        users.create_profile(
            email=email,
            password=password,
            user_type=user_type,
            full_name=full_name,
            reporting_manager=manager,
        )

    settings = container.settings_service.get()
    missing = {k: v for k, v in DEMO_SETTINGS.items() if not getattr(settings, k)}
    if missing:
        container.settings_service.update(missing)
    if not settings.vendors:
        container.settings_service.add_vendor(DEMO_VENDOR)
    logger.info("Demo data ready (%d demo accounts)", len(DEMO_USERS))
