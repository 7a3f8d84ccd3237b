"""Request/response schemas - JSON names vs column names.

Invariants:
    - description_name (JSON) maps to Bean.description_bean (column)
    - fullname (JSON) maps to Users.full_name (column)
    - Partial distributor updates only report keys the client sent
    - Unknown keys in a body are ignored
"""

from datetime import datetime, timezone

from coffee_valley.models.users import Users
from coffee_valley.schemas.bean import BeanCreate, BeanResponse
from coffee_valley.schemas.distributor import DistributorUpdate
from coffee_valley.schemas.users import UserCreate, UserResponse


def test_bean_create_maps_description_column():
    bean = BeanCreate(
        bean_name="Gayo", description_name="Aceh", price_per_unit="100",
    ).to_record()
    assert bean.description_bean == "Aceh"
    assert bean.price_per_unit == "100"


def test_bean_response_maps_description_back():
    bean = BeanCreate(description_name="Aceh").to_record()
    now = datetime.now(timezone.utc)
    bean.id, bean.created_at, bean.updated_at = "abc", now, now
    response = BeanResponse.from_record(bean).model_dump()
    assert response["description_name"] == "Aceh"
    assert "description_bean" not in response


def test_distributor_update_tracks_sent_fields():
    update = DistributorUpdate.model_validate({"city": "Bogor", "email": None})
    assert update.model_dump(exclude_unset=True) == {"city": "Bogor", "email": None}


def test_unknown_keys_ignored():
    body = BeanCreate.model_validate({"bean_name": "X", "ID": "forced-id"})
    assert not hasattr(body, "ID")
    assert body.bean_name == "X"


def test_user_create_and_response_hide_password():
    user = UserCreate(fullname="Rina", email="r@x.id", password="pw").to_record()
    assert isinstance(user, Users)
    assert user.full_name == "Rina"
    now = datetime.now(timezone.utc)
    user.id, user.created_at, user.updated_at = 7, now, now
    response = UserResponse.from_record(user).model_dump()
    assert response["fullname"] == "Rina"
    assert "password" not in response
