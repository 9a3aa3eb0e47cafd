"""Message entities shared by the single-chat and broadcast interfaces."""

from __future__ import annotations

from dataclasses import dataclass
from random import getrandbits
from typing import Any, Optional, Union

from .conv import to_string
from .enums import PushFlag
from .types import AndroidInfo, ApnsInfo, MsgBody, OfflinePushInfo, message_type_of

_MAX_RANDOM = 0xFFFFFFFF


@dataclass
class OfflinePush:
    """Offline push settings of a message; platform details are created on first use."""

    push_flag: Union[PushFlag, int] = PushFlag.YES
    title: str = ""
    desc: str = ""
    ext: str = ""
    android_info: Optional[AndroidInfo] = None
    apns_info: Optional[ApnsInfo] = None

    def set_ext(self, ext: Any) -> None:
        """Set the pass-through content; values that are not strings are rendered as text."""
        self.ext = to_string(ext)

    @property
    def android(self) -> AndroidInfo:
        """The Android settings, created when first accessed."""
        if self.android_info is None:
            self.android_info = AndroidInfo()
        return self.android_info

    @property
    def apns(self) -> ApnsInfo:
        """The iOS settings, created when first accessed."""
        if self.apns_info is None:
            self.apns_info = ApnsInfo()
        return self.apns_info

    def to_info(self) -> OfflinePushInfo:
        """Return the wire form of these settings."""
        return OfflinePushInfo(
            push_flag=self.push_flag,
            title=self.title,
            desc=self.desc,
            ext=self.ext,
            android_info=self.android_info,
            apns_info=self.apns_info,
        )


class Message:
    """A message: its sender, lifetime, random number, body and offline push settings."""

    def __init__(self, sender: str = "", life_time: int = 0) -> None:
        self.sender = sender
        self.life_time = life_time
        self._random = 0
        self._body: list[MsgBody] = []
        self._offline_push: Optional[OfflinePush] = None

    @property
    def random(self) -> int:
        """The message random number, generated on first use if not set."""
        if not self._random:
            self._random = getrandbits(32)
        return self._random

    @random.setter
    def random(self, value: int) -> None:
        if not 0 <= value <= _MAX_RANDOM:
            raise ValueError("message random must fit in 32 unsigned bits")
        self._random = int(value)

    def add_content(self, *contents: Any) -> None:
        """Append message elements to the body."""
        for content in contents:
            msg_type = message_type_of(content)
            self._body.append(MsgBody(msg_type=msg_type or "", msg_content=content))

    def set_content(self, *contents: Any) -> None:
        """Replace the body with the given message elements."""
        self._body.clear()
        self.add_content(*contents)

    @property
    def body(self) -> list[MsgBody]:
        return self._body

    @property
    def offline_push(self) -> OfflinePush:
        """The offline push settings, created when first accessed."""
        if self._offline_push is None:
            self._offline_push = OfflinePush()
        return self._offline_push

    @property
    def offline_push_info(self) -> Optional[OfflinePushInfo]:
        """The wire form of the offline push settings, or None if none were made."""
        if self._offline_push is None:
            return None
        return self._offline_push.to_info()

    def validate(self) -> None:
        """Raise ValueError if the body is empty or holds an unknown element."""
        if not self._body:
            raise ValueError("message content is not set")
        if any(not item.msg_type for item in self._body):
            raise ValueError("invalid message content")