import pytest

from src.staffing_portal.staffing_portal.core.enums import CommissionType
from src.staffing_portal.staffing_portal.core.exceptions import NotFoundError, ValidationError
from src.staffing_portal.staffing_portal.documents.memory_store import InMemoryDocumentStore
from src.staffing_portal.staffing_portal.settings.repository import SettingsRepository
from src.staffing_portal.staffing_portal.settings.service import SettingsService


@pytest.fixture()
def store():
    return InMemoryDocumentStore()


@pytest.fixture()
def service(store):
    return SettingsService(SettingsRepository(store))


def test_defaults_when_nothing_is_stored(service):
    settings = service.get()
    assert settings.branding["portal_name"] == "Staffing Portal"
    assert settings.panel_config == {"email_notifications": True, "maintenance_mode": False}
    assert settings.vendors == ()


def test_partial_update_merges_over_stored_values(service, store):
    service.update({"job_roles": ["Cashier"]})
    service.update({"locations": ["Pune"], "branding": {"portal_name": "Acme Jobs"}})

    settings = service.get()
    assert settings.job_roles == ("Cashier",)
    assert settings.locations == ("Pune",)
    assert settings.branding["portal_name"] == "Acme Jobs"
    assert settings.branding["hire_talent"]["title"] == "Hire Top Talent"
    assert set(store.get("settings", "appSettings").data) == {"job_roles", "locations", "branding"}


def test_unknown_keys_are_rejected(service):
    with pytest.raises(ValidationError):
        service.update({"colour": "red"})


def test_vendor_lifecycle(service):
    vendor = service.add_vendor(
        {
            "partner_name": "Globex",
            "brand_names": ["Globex Retail"],
            "commission_type": "Slab Based",
            "commission_slabs": [{"from": "1", "to": "5", "amount": "1000"}],
        }
    )
    assert vendor.commission_type == CommissionType.SLAB
    assert service.get().find_vendor("Globex Retail").id == vendor.id

    updated = service.update_vendor(vendor.id, {"status": "Inactive"})
    assert updated.status == "Inactive"
    assert updated.commission_slabs[0].amount == "1000"

    service.delete_vendor(vendor.id)
    assert service.get().vendors == ()
    with pytest.raises(NotFoundError):
        service.delete_vendor(vendor.id)


def test_vendor_requires_partner_name_and_valid_commission(service):
    with pytest.raises(ValidationError):
        service.add_vendor({"partner_name": ""})
    with pytest.raises(ValidationError):
        service.add_vendor({"partner_name": "X", "commission_type": "Per Hour"})
