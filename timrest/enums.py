"""Enumerations and fixed codes of the instant messaging REST interface."""

from enum import Enum, IntEnum

# Result codes
SUCCESS_CODE = 0
INVALID_PARAMS_CODE = -1
INVALID_RESPONSE_CODE = -2

# Image formats
IMAGE_FORMAT_JPG = 1
IMAGE_FORMAT_GIF = 2
IMAGE_FORMAT_PNG = 3
IMAGE_FORMAT_BMP = 4
IMAGE_FORMAT_OTHER = 255

# Image kinds
IMAGE_TYPE_ORIGINAL = 1
IMAGE_TYPE_PIC = 2
IMAGE_TYPE_THUMB = 3

# Standard profile attributes
STANDARD_ATTR_NICKNAME = "Tag_Profile_IM_Nick"
STANDARD_ATTR_GENDER = "Tag_Profile_IM_Gender"
STANDARD_ATTR_BIRTHDAY = "Tag_Profile_IM_BirthDay"
STANDARD_ATTR_LOCATION = "Tag_Profile_IM_Location"
STANDARD_ATTR_SIGNATURE = "Tag_Profile_IM_SelfSignature"
STANDARD_ATTR_ALLOW_TYPE = "Tag_Profile_IM_AllowType"
STANDARD_ATTR_LANGUAGE = "Tag_Profile_IM_Language"
STANDARD_ATTR_AVATAR = "Tag_Profile_IM_Image"
STANDARD_ATTR_MSG_SETTINGS = "Tag_Profile_IM_MsgSettings"
STANDARD_ATTR_ADMIN_FORBID_TYPE = "Tag_Profile_IM_AdminForbidType"
STANDARD_ATTR_LEVEL = "Tag_Profile_IM_Level"
STANDARD_ATTR_ROLE = "Tag_Profile_IM_Role"

CUSTOM_ATTR_PREFIX = "Tag_Profile_Custom"


class ActionStatus(str, Enum):
    """Status word carried by action responses."""

    OK = "OK"
    FAIL = "FAIL"


class MsgType(str, Enum):
    """Kinds of message elements."""

    TEXT = "TIMTextElem"
    LOCATION = "TIMLocationElem"
    FACE = "TIMFaceElem"
    CUSTOM = "TIMCustomElem"
    SOUND = "TIMSoundElem"
    IMAGE = "TIMImageElem"
    FILE = "TIMFileElem"
    VIDEO = "TIMVideoFileElem"


class GenderType(str, Enum):
    """Gender of a user profile."""

    UNKNOWN = "Gender_Type_Unknown"
    FEMALE = "Gender_Type_Female"
    MALE = "Gender_Type_Male"


class AllowType(str, Enum):
    """How friend requests to a user are verified."""

    NEED_CONFIRM = "AllowType_Type_NeedConfirm"
    ALLOW_ANY = "AllowType_Type_AllowAny"
    DENY_ANY = "AllowType_Type_DenyAny"


class AdminForbidType(str, Enum):
    """Whether an administrator forbids a user to send friend requests."""

    NONE = "AdminForbid_Type_None"
    SEND_OUT = "AdminForbid_Type_SendOut"


class SyncOtherMachine(IntEnum):
    """Whether a message is synchronised to the sender's other devices."""

    YES = 1
    NO = 2


class PushFlag(IntEnum):
    """Whether a message is pushed while the receiver is offline."""

    YES = 0
    NO = 1


class HuaWeiImportance(str, Enum):
    """Category of a Huawei push notification."""

    LOW = "LOW"
    NORMAL = "NORMAL"


class HuaweiIntentParam(IntEnum):
    """How the pass-through content is handed to a Huawei page."""

    ACTION = 0
    INTENT = 1


class VivoClassification(IntEnum):
    """Category of a vivo push notification."""

    OPERATION = 0
    SYSTEM = 1


class BadgeMode(IntEnum):
    """Whether an iOS message counts on the badge."""

    NORMAL = 0
    IGNORE = 1


class MutableContent(IntEnum):
    """The iOS 10 push extension switch."""

    NORMAL = 0
    ENABLE = 1