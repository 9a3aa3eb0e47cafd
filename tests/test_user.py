from datetime import date

import pytest

from timrest.enums import (
    CUSTOM_ATTR_PREFIX,
    INVALID_PARAMS_CODE,
    STANDARD_ATTR_BIRTHDAY,
    STANDARD_ATTR_GENDER,
    STANDARD_ATTR_LANGUAGE,
    STANDARD_ATTR_LOCATION,
    STANDARD_ATTR_NICKNAME,
    SUCCESS_CODE,
    AdminForbidType,
    AllowType,
    GenderType,
)
from timrest.user import User


def test_user_id_and_empty_attrs():
    user = User("alice")
    assert user.user_id == "alice"
    assert user.attrs == {}
    assert user.nickname is None
    assert user.level is None
    assert user.location is None


def test_nickname_round_trip():
    user = User("alice")
    user.nickname = "Alice"
    assert user.nickname == "Alice"
    assert user.attrs[STANDARD_ATTR_NICKNAME] == "Alice"


def test_enum_attributes_round_trip():
    user = User()
    user.gender = GenderType.FEMALE
    user.allow_type = AllowType.DENY_ANY
    user.admin_forbid_type = AdminForbidType.SEND_OUT
    assert user.gender is GenderType.FEMALE
    assert user.allow_type is AllowType.DENY_ANY
    assert user.admin_forbid_type is AdminForbidType.SEND_OUT


def test_gender_from_server_string():
    user = User()
    user.set_attr(STANDARD_ATTR_GENDER, "Gender_Type_Male")
    assert user.gender is GenderType.MALE


def test_birthday_round_trip():
    user = User()
    user.birthday = date(1990, 5, 17)
    assert user.attrs[STANDARD_ATTR_BIRTHDAY] == 19900517
    assert user.birthday == date(1990, 5, 17)


def test_birthday_from_server_string_and_empty():
    user = User()
    user.set_attr(STANDARD_ATTR_BIRTHDAY, "20001231")
    assert user.birthday == date(2000, 12, 31)
    user.set_attr(STANDARD_ATTR_BIRTHDAY, "")
    assert user.birthday is None


def test_numeric_attributes_from_floats():
    user = User()
    user.set_attr(STANDARD_ATTR_LANGUAGE, 3.0)
    assert user.language == 3
    user.level = 7
    user.role = 2
    user.msg_settings = 1
    assert (user.level, user.role, user.msg_settings) == (7, 2, 1)


def test_location_round_trip():
    user = User()
    user.set_location(86, 11, 22, 33)
    assert user.attrs[STANDARD_ATTR_LOCATION] == "0086001100220033"
    assert user.location == (86, 11, 22, 33)
    assert user.is_valid


def test_location_invalid_code_records_error():
    user = User()
    user.set_location(12345, 1, 1, 1)
    assert not user.is_valid
    assert user.error.code == INVALID_PARAMS_CODE
    assert user.location is None


@pytest.mark.parametrize("stored", ["123", "abcd00000000000x", "00-1000000000000"])
def test_malformed_location_is_none(stored):
    user = User()
    user.set_attr(STANDARD_ATTR_LOCATION, stored)
    assert user.location is None


def test_custom_attr_round_trip():
    user = User()
    user.set_custom_attr("score", 10)
    assert user.get_custom_attr("score") == 10
    assert user.attrs == {f"{CUSTOM_ATTR_PREFIX}_score": 10}
    assert user.get_custom_attr("other") is None


def test_set_error_ignores_success():
    user = User()
    user.set_error(SUCCESS_CODE, "")
    assert user.is_valid
    assert user.error is None
    user.set_error(70107, "account missing")
    assert not user.is_valid
    assert user.error.code == 70107
    assert str(user.error) == "account missing"