from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.application.services.business_service import (
    current_settings_notice,
    setup_business,
    update_business_settings,
)
from app.core.exceptions import AppError, ConflictException
from app.core.timeutils import now
from app.domain.schemas.business import BusinessCreate, BusinessUpdate

SETUP_FORM = {
    "name": "Sunrise Bakery",
    "industry": "Food",
    "description": "Neighbourhood bakery",
    "business_info": "Open 7am-7pm",
}


class _FailingBusinessRepo:
    def __init__(self):
        self.rolled_back = False

    def get_by_user_id(self, user_id):
        return None

    def create(self, obj_in):
        raise OperationalError("INSERT INTO businesses", {}, Exception("connection lost"))

    def rollback(self):
        self.rolled_back = True


def test_setup_creates_single_business_for_user(business_repo, user):
    business = setup_business(business_repo, user, BusinessCreate(**SETUP_FORM))

    assert business.user_id == user.id
    assert business.name == "Sunrise Bakery"
    assert business_repo.get_by_user_id(user.id).id == business.id


def test_setup_twice_is_rejected(business_repo, user):
    setup_business(business_repo, user, BusinessCreate(**SETUP_FORM))

    with pytest.raises(ConflictException):
        setup_business(business_repo, user, BusinessCreate(**SETUP_FORM))


def test_setup_failure_surfaces_flat_message(user):
    repo = _FailingBusinessRepo()

    with pytest.raises(AppError) as exc_info:
        setup_business(repo, user, BusinessCreate(**SETUP_FORM))

    assert exc_info.value.message == "Could not create business"
    assert repo.rolled_back is True


def test_settings_update_persists_fields_and_timestamp(business_repo, business):
    saved_at = now() + timedelta(seconds=10)
    form = BusinessUpdate(
        name="Sunrise Bakery & Cafe",
        industry="Hospitality",
        description="Bakery and coffee",
        business_info="Now serving espresso",
    )

    result = update_business_settings(business_repo, business, form, at=saved_at)

    stored = business_repo.get_by_id(business.id)
    assert stored.name == "Sunrise Bakery & Cafe"
    assert stored.industry == "Hospitality"
    assert stored.description == "Bakery and coffee"
    assert stored.business_info == "Now serving espresso"
    assert stored.updated_at.replace(tzinfo=None) == saved_at.replace(tzinfo=None)
    assert result.business.name == "Sunrise Bakery & Cafe"


def test_settings_notice_clears_after_delay(business_repo, business):
    saved_at = now() + timedelta(seconds=10)
    form = BusinessUpdate(**SETUP_FORM)

    notice = update_business_settings(business_repo, business, form, at=saved_at).notice

    assert notice.is_visible(saved_at)
    assert notice.is_visible(saved_at + timedelta(seconds=2.9))
    assert not notice.is_visible(saved_at + timedelta(seconds=3))

    assert current_settings_notice(business, saved_at + timedelta(seconds=1)) is not None
    assert current_settings_notice(business, saved_at + timedelta(seconds=5)) is None


def test_no_notice_before_any_settings_save(business_repo, user):
    business = setup_business(business_repo, user, BusinessCreate(**SETUP_FORM))

    assert current_settings_notice(business, now()) is None


def test_get_business_before_setup_returns_404(client):
    response = client.get("/api/business")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "EntityNotFoundException"
    assert response.json()["error"]["message"] == "Business not configured"


def test_setup_via_api(client, user):
    response = client.post("/api/business", json=SETUP_FORM)

    assert response.status_code == 201
    assert response.json()["user_id"] == user.id

    again = client.post("/api/business", json=SETUP_FORM)
    assert again.status_code == 409


def test_setup_requires_every_field(client):
    response = client.post("/api/business", json={**SETUP_FORM, "business_info": "   "})

    assert response.status_code == 422


def test_settings_form_prefilled_and_saved(client, business):
    form = client.get("/api/business/settings").json()
    assert form == {
        "name": business.name,
        "industry": business.industry,
        "description": business.description,
        "business_info": business.business_info,
    }

    response = client.put("/api/business/settings", json={**form, "name": "Renamed"})

    assert response.status_code == 200
    body = response.json()
    assert body["business"]["name"] == "Renamed"
    assert body["notice"]["message"] == "Settings saved successfully"
    assert client.get("/api/business").json()["name"] == "Renamed"


class _RacingBusinessRepo(_FailingBusinessRepo):
    def create(self, obj_in):
        raise IntegrityError("INSERT INTO businesses", {}, Exception("UNIQUE constraint failed: businesses.user_id"))


class _DisconnectedSettingsRepo:
    """Update fails; afterwards every attribute refresh would fail too."""

    def __init__(self):
        self.rolled_back = False

    def update(self, db_obj, obj_in):
        raise OperationalError("UPDATE businesses", {}, Exception("connection lost"))

    def rollback(self):
        self.rolled_back = True


class _ExpiringRecord:
    """Stands in for an ORM row whose attributes reload after a rollback."""

    def __init__(self, repo, id):
        self._repo = repo
        self._id = id

    @property
    def id(self):
        if self._repo.rolled_back:
            raise OperationalError("SELECT", {}, Exception("connection lost"))
        return self._id


def test_concurrent_setup_maps_unique_violation_to_conflict(user):
    repo = _RacingBusinessRepo()

    with pytest.raises(ConflictException):
        setup_business(repo, user, BusinessCreate(**SETUP_FORM))

    assert repo.rolled_back is True


def test_setup_failure_does_not_reload_user_after_rollback():
    repo = _FailingBusinessRepo()

    with pytest.raises(AppError) as exc_info:
        setup_business(repo, _ExpiringRecord(repo, 3), BusinessCreate(**SETUP_FORM))

    assert exc_info.value.message == "Could not create business"


def test_settings_update_failure_surfaces_flat_message():
    repo = _DisconnectedSettingsRepo()
    business = _ExpiringRecord(repo, 11)

    with pytest.raises(AppError) as exc_info:
        update_business_settings(repo, business, BusinessUpdate(**SETUP_FORM))

    assert exc_info.value.message == "Could not update business settings"
    assert repo.rolled_back is True


def test_setup_and_settings_keep_text_as_submitted(client):
    padded = {**SETUP_FORM, "name": " Shop ", "business_info": "  Open daily\n"}

    created = client.post("/api/business", json=padded)

    assert created.status_code == 201
    assert created.json()["name"] == " Shop "
    assert created.json()["business_info"] == "  Open daily\n"

    saved = client.put("/api/business/settings", json={**padded, "description": " Corner shop "})

    assert saved.status_code == 200
    assert saved.json()["business"]["description"] == " Corner shop "
    assert client.get("/api/business/settings").json()["description"] == " Corner shop "
