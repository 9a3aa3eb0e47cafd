import json

import pytest

from timrest.enums import BadgeMode, MsgType, PushFlag
from timrest.types import (
    AndroidInfo,
    ApnsInfo,
    ImageInfo,
    MsgBody,
    MsgCustomContent,
    MsgFaceContent,
    MsgFileContent,
    MsgImageContent,
    MsgLocationContent,
    MsgSoundContent,
    MsgTextContent,
    MsgVideoContent,
    OfflinePushInfo,
    TagPair,
    message_type_of,
    to_payload,
)


def test_empty_offline_push_info_omits_everything():
    assert to_payload(OfflinePushInfo()) == {}


def test_offline_push_info_nested_android_info():
    info = OfflinePushInfo(android_info=AndroidInfo(sound="a.mp3"))
    assert to_payload(info) == {"AndroidInfo": {"Sound": "a.mp3"}}


def test_offline_push_info_enum_flag_becomes_number():
    info = OfflinePushInfo(push_flag=PushFlag.NO, title="t")
    payload = to_payload(info)
    assert payload == {"PushFlag": 1, "Title": "t"}
    assert type(payload["PushFlag"]) is int


def test_apns_zero_badge_mode_is_omitted():
    info = ApnsInfo(badge_mode=BadgeMode.NORMAL, title="x")
    assert to_payload(info) == {"Title": "x"}


def test_text_message_body_payload():
    body = MsgBody(MsgType.TEXT, MsgTextContent("hi"))
    assert to_payload(body) == {"MsgType": "TIMTextElem", "MsgContent": {"Text": "hi"}}


def test_fields_without_omitempty_keep_zero_values():
    assert to_payload(MsgFaceContent()) == {"Index": 0, "Data": ""}


def test_image_content_uses_wire_names():
    content = MsgImageContent(
        uuid="id-1",
        image_format=3,
        image_infos=[ImageInfo(type=1, size=2, width=3, height=4, url="u")],
    )
    assert to_payload(content) == {
        "UUID": "id-1",
        "ImageFormat": 3,
        "ImageInfoArray": [
            {"Type": 1, "Size": 2, "Width": 3, "Height": 4, "URL": "u"}
        ],
    }


def test_sound_content_download_flag_key():
    payload = to_payload(MsgSoundContent(uuid="s", url="u", size=5, second=6, download_flag=2))
    assert payload["Download_Flag"] == 2
    assert payload["Url"] == "u"


def test_tag_pair_with_nested_values_is_json_ready():
    pair = TagPair("Tag_Profile_IM_Nick", [MsgTextContent("a"), {"k": PushFlag.NO}])
    payload = to_payload(pair)
    assert json.loads(json.dumps(payload)) == {
        "Tag": "Tag_Profile_IM_Nick",
        "Value": [{"Text": "a"}, {"k": 1}],
    }


def test_video_content_payload_has_all_keys():
    payload = to_payload(MsgVideoContent(video_format="mp4"))
    assert len(payload) == 13
    assert payload["VideoFormat"] == "mp4"


def test_plain_values_pass_through():
    assert to_payload({"a": [1, 2], "b": None}) == {"a": [1, 2], "b": None}


@pytest.mark.parametrize(
    "content, expected",
    [
        (MsgTextContent(), MsgType.TEXT),
        (MsgLocationContent(), MsgType.LOCATION),
        (MsgFaceContent(), MsgType.FACE),
        (MsgCustomContent(), MsgType.CUSTOM),
        (MsgSoundContent(), MsgType.SOUND),
        (MsgImageContent(), MsgType.IMAGE),
        (MsgFileContent(), MsgType.FILE),
        (MsgVideoContent(), MsgType.VIDEO),
    ],
)
def test_message_type_of_known_contents(content, expected):
    assert message_type_of(content) is expected


@pytest.mark.parametrize("content", ["text", 3, {"Text": "x"}, ImageInfo()])
def test_message_type_of_unknown_content_is_none(content):
    assert message_type_of(content) is None