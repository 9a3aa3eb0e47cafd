import json

import pytest

from timrest.enums import (
    ActionStatus,
    AdminForbidType,
    AllowType,
    BadgeMode,
    GenderType,
    HuaWeiImportance,
    HuaweiIntentParam,
    MsgType,
    MutableContent,
    PushFlag,
    SyncOtherMachine,
    VivoClassification,
)


def test_gender_wire_values_round_trip():
    values = ["Gender_Type_Unknown", "Gender_Type_Female", "Gender_Type_Male"]
    assert [GenderType(v).value for v in values] == values
    assert len({GenderType(v) for v in values}) == 3


def test_allow_type_wire_values_round_trip():
    values = [
        "AllowType_Type_NeedConfirm",
        "AllowType_Type_AllowAny",
        "AllowType_Type_DenyAny",
    ]
    assert [AllowType(v).value for v in values] == values
    assert len({AllowType(v) for v in values}) == 3


def test_admin_forbid_type_wire_values_round_trip():
    values = ["AdminForbid_Type_None", "AdminForbid_Type_SendOut"]
    assert [AdminForbidType(v).value for v in values] == values
    assert len({AdminForbidType(v) for v in values}) == 2


def test_sync_other_machine_wire_values_round_trip():
    values = [1, 2]
    assert [SyncOtherMachine(v).value for v in values] == values
    assert len({SyncOtherMachine(v) for v in values}) == 2


def test_push_flag_wire_values_round_trip():
    values = [0, 1]
    assert [PushFlag(v).value for v in values] == values
    assert len({PushFlag(v) for v in values}) == 2


def test_huawei_importance_wire_values_round_trip():
    values = ["LOW", "NORMAL"]
    assert [HuaWeiImportance(v).value for v in values] == values
    assert len({HuaWeiImportance(v) for v in values}) == 2


def test_huawei_intent_param_wire_values_round_trip():
    values = [0, 1]
    assert [HuaweiIntentParam(v).value for v in values] == values
    assert len({HuaweiIntentParam(v) for v in values}) == 2


def test_vivo_classification_wire_values_round_trip():
    values = [0, 1]
    assert [VivoClassification(v).value for v in values] == values
    assert len({VivoClassification(v) for v in values}) == 2


def test_badge_mode_wire_values_round_trip():
    values = [0, 1]
    assert [BadgeMode(v).value for v in values] == values
    assert len({BadgeMode(v) for v in values}) == 2


def test_mutable_content_wire_values_round_trip():
    values = [0, 1]
    assert [MutableContent(v).value for v in values] == values
    assert len({MutableContent(v) for v in values}) == 2


def test_msg_type_wire_values_round_trip():
    values = [
        "TIMTextElem",
        "TIMLocationElem",
        "TIMFaceElem",
        "TIMCustomElem",
        "TIMSoundElem",
        "TIMImageElem",
        "TIMFileElem",
        "TIMVideoFileElem",
    ]
    assert [MsgType(v).value for v in values] == values
    assert len({MsgType(v) for v in values}) == 8


def test_action_status_wire_values_round_trip():
    values = ["OK", "FAIL"]
    assert [ActionStatus(v).value for v in values] == values
    assert len({ActionStatus(v) for v in values}) == 2


def test_parse_gender_from_wire():
    assert GenderType("Gender_Type_Female") is GenderType.FEMALE


def test_parse_message_type_from_wire():
    assert MsgType("TIMVideoFileElem") is MsgType.VIDEO


def test_string_enum_serialises_as_its_value():
    member = AllowType("AllowType_Type_DenyAny")
    assert json.loads(json.dumps(member)) == "AllowType_Type_DenyAny"


def test_int_enum_serialises_as_number():
    member = SyncOtherMachine(2)
    assert json.loads(json.dumps({"flag": member})) == {"flag": 2}


def test_push_flag_lookup_by_number():
    assert PushFlag(1) is PushFlag.NO
    assert PushFlag(0) is PushFlag.YES


def test_unknown_wire_value_is_rejected():
    with pytest.raises(ValueError):
        AdminForbidType("AdminForbid_Type_Other")


def test_action_status_fail_lookup():
    assert ActionStatus("FAIL") is ActionStatus.FAIL