"""Wire data types shared by the interface modules."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Optional

from .enums import MsgType


def _wire(name: str, *, omitempty: bool = False, **kwargs: Any) -> Any:
    return field(metadata={"json": name, "omitempty": omitempty}, **kwargs)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bool, int, float)):
        return not value
    if is_dataclass(value):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def to_payload(value: Any) -> Any:
    """Convert a value into plain JSON-ready data using the wire field names."""
    if isinstance(value, Enum):
        return to_payload(value.value)
    if is_dataclass(value) and not isinstance(value, type):
        payload = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if f.metadata.get("omitempty") and _is_empty(item):
                continue
            payload[f.metadata.get("json", f.name)] = to_payload(item)
        return payload
    if isinstance(value, Mapping):
        return {
            (key.value if isinstance(key, Enum) else key): to_payload(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_payload(item) for item in value]
    return value


@dataclass
class AndroidInfo:
    """Android offline push settings."""

    sound: str = _wire("Sound", omitempty=True, default="")
    hua_wei_channel_id: str = _wire("HuaWeiChannelID", omitempty=True, default="")
    xiao_mi_channel_id: str = _wire("XiaoMiChannelID", omitempty=True, default="")
    oppo_channel_id: str = _wire("OPPOChannelID", omitempty=True, default="")
    google_channel_id: str = _wire("GoogleChannelID", omitempty=True, default="")
    vivo_classification: int = _wire("VIVOClassification", omitempty=True, default=0)
    hua_wei_importance: str = _wire("HuaWeiImportance", omitempty=True, default="")
    ext_as_huawei_intent_param: int = _wire(
        "ExtAsHuaweiIntentParam", omitempty=True, default=0
    )


@dataclass
class ApnsInfo:
    """iOS offline push settings."""

    badge_mode: int = _wire("BadgeMode", omitempty=True, default=0)
    title: str = _wire("Title", omitempty=True, default="")
    sub_title: str = _wire("SubTitle", omitempty=True, default="")
    image: str = _wire("Image", omitempty=True, default="")
    mutable_content: int = _wire("MutableContent", omitempty=True, default=0)


@dataclass
class OfflinePushInfo:
    """Offline push configuration of a message."""

    push_flag: int = _wire("PushFlag", omitempty=True, default=0)
    title: str = _wire("Title", omitempty=True, default="")
    desc: str = _wire("Desc", omitempty=True, default="")
    ext: str = _wire("Ext", omitempty=True, default="")
    android_info: Optional[AndroidInfo] = _wire("AndroidInfo", omitempty=True, default=None)
    apns_info: Optional[ApnsInfo] = _wire("ApnsInfo", omitempty=True, default=None)


@dataclass
class MsgBody:
    """One element of a message body."""

    msg_type: Any = _wire("MsgType", default="")
    msg_content: Any = _wire("MsgContent", default=None)


@dataclass
class TagPair:
    """A tag and its value."""

    tag: str = _wire("Tag", default="")
    value: Any = _wire("Value", default=None)


@dataclass
class MsgTextContent:
    """Text message element."""

    text: str = _wire("Text", default="")


@dataclass
class MsgLocationContent:
    """Location message element."""

    desc: str = _wire("Desc", default="")
    latitude: float = _wire("Latitude", default=0.0)
    longitude: float = _wire("Longitude", default=0.0)


@dataclass
class MsgFaceContent:
    """Emoticon message element."""

    index: int = _wire("Index", default=0)
    data: str = _wire("Data", default="")


@dataclass
class MsgCustomContent:
    """Custom message element."""

    desc: str = _wire("Desc", default="")
    data: str = _wire("Data", default="")
    ext: str = _wire("Ext", default="")
    sound: str = _wire("Sound", default="")


@dataclass
class MsgSoundContent:
    """Voice message element."""

    uuid: str = _wire("UUID", default="")
    url: str = _wire("Url", default="")
    size: int = _wire("Size", default=0)
    second: int = _wire("Second", default=0)
    download_flag: int = _wire("Download_Flag", default=0)


@dataclass
class ImageInfo:
    """Download information of one image variant."""

    type: int = _wire("Type", default=0)
    size: int = _wire("Size", default=0)
    width: int = _wire("Width", default=0)
    height: int = _wire("Height", default=0)
    url: str = _wire("URL", default="")


@dataclass
class MsgImageContent:
    """Image message element."""

    uuid: str = _wire("UUID", default="")
    image_format: int = _wire("ImageFormat", default=0)
    image_infos: list = _wire("ImageInfoArray", default_factory=list)


@dataclass
class MsgFileContent:
    """File message element."""

    url: str = _wire("Url", default="")
    uuid: str = _wire("UUID", default="")
    file_size: int = _wire("FileSize", default=0)
    file_name: str = _wire("FileName", default="")
    download_flag: int = _wire("Download_Flag", default=0)


@dataclass
class MsgVideoContent:
    """Video message element."""

    video_uuid: str = _wire("VideoUUID", default="")
    video_url: str = _wire("VideoUrl", default="")
    video_size: int = _wire("VideoSize", default=0)
    video_second: int = _wire("VideoSecond", default=0)
    video_format: str = _wire("VideoFormat", default="")
    video_download_flag: int = _wire("VideoDownloadFlag", default=0)
    thumb_url: str = _wire("ThumbUrl", default="")
    thumb_uuid: str = _wire("ThumbUUID", default="")
    thumb_size: int = _wire("ThumbSize", default=0)
    thumb_width: int = _wire("ThumbWidth", default=0)
    thumb_height: int = _wire("ThumbHeight", default=0)
    thumb_format: str = _wire("ThumbFormat", default="")
    thumb_download_flag: int = _wire("ThumbDownloadFlag", default=0)


_CONTENT_TYPES = {
    MsgTextContent: MsgType.TEXT,
    MsgLocationContent: MsgType.LOCATION,
    MsgFaceContent: MsgType.FACE,
    MsgCustomContent: MsgType.CUSTOM,
    MsgSoundContent: MsgType.SOUND,
    MsgImageContent: MsgType.IMAGE,
    MsgFileContent: MsgType.FILE,
    MsgVideoContent: MsgType.VIDEO,
}


def message_type_of(content: Any) -> Optional[MsgType]:
    """Return the element type of a content object, or None if it is not one."""
    return _CONTENT_TYPES.get(type(content))