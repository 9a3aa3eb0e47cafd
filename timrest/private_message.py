"""Single-chat message entity and the records exchanged by the single-chat calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .enums import SyncOtherMachine
from .message import Message
from .types import MsgBody

_FORBID_BEFORE_SEND = "ForbidBeforeSendMsgCallback"
_FORBID_AFTER_SEND = "ForbidAfterSendMsgCallback"
_NO_UNREAD = "NoUnread"
_NO_LAST_MSG = "NoLastMsg"


class PrivateMessage(Message):
    """A single-chat message with its receivers and per-message controls."""

    def __init__(self, sender: str = "", life_time: int = 0) -> None:
        super().__init__(sender=sender, life_time=life_time)
        self._receivers: list[str] = []
        self.sync_other_machine: Union[SyncOtherMachine, int] = 0
        self.timestamp = 0
        self.serial_no = 0
        self.custom_data: Any = None
        self._send_controls: dict[str, bool] = {}
        self._callback_controls: dict[str, bool] = {}

    @property
    def receivers(self) -> list[str]:
        return list(self._receivers)

    def add_receivers(self, *user_ids: str) -> None:
        """Append receivers to the ones already set."""
        self._receivers.extend(user_ids)

    def set_receivers(self, *user_ids: str) -> None:
        """Replace the receivers with the given ones."""
        self._receivers.clear()
        self.add_receivers(*user_ids)

    @property
    def first_receiver(self) -> str:
        """The first receiver; raises ValueError if none is set."""
        if not self._receivers:
            raise ValueError("message receiver is not set")
        return self._receivers[0]

    def forbid_before_send_msg_callback(self) -> None:
        """Forbid the before-send callback for this message."""
        self._callback_controls[_FORBID_BEFORE_SEND] = True

    def forbid_after_send_msg_callback(self) -> None:
        """Forbid the after-send callback for this message."""
        self._callback_controls[_FORBID_AFTER_SEND] = True

    @property
    def forbid_callback_control(self) -> list[str]:
        """The callbacks forbidden for this message."""
        return list(self._callback_controls)

    def no_unread(self) -> None:
        """Do not count this message as unread."""
        self._send_controls[_NO_UNREAD] = True

    def no_last_msg(self) -> None:
        """Do not update the conversation list with this message."""
        self._send_controls[_NO_LAST_MSG] = True

    @property
    def send_msg_control(self) -> list[str]:
        """The send controls set for this message."""
        return list(self._send_controls)

    def validate(self) -> None:
        """Raise ValueError if the body or the receivers are missing or invalid."""
        super().validate()
        if not self._receivers:
            raise ValueError("message receiver is not set")


@dataclass
class SendMessageRet:
    """Result of sending one message."""

    msg_key: str = ""
    msg_time: int = 0


@dataclass
class SendMessageError:
    """A receiver the batch send failed for."""

    user_id: str = ""
    error_code: int = 0


@dataclass
class SendMessagesRet:
    """Result of a batch send."""

    msg_key: str = ""
    errors: list[SendMessageError] = field(default_factory=list)


@dataclass
class FetchMessagesArg:
    """Parameters of a message history query."""

    from_user_id: str
    to_user_id: str
    max_limited: int
    min_time: int
    max_time: int
    last_msg_key: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Return the request body of the query."""
        payload: dict[str, Any] = {
            "From_Account": self.from_user_id,
            "To_Account": self.to_user_id,
            "MaxCnt": self.max_limited,
            "MinTime": self.min_time,
            "MaxTime": self.max_time,
        }
        if self.last_msg_key:
            payload["LastMsgKey"] = self.last_msg_key
        return payload


@dataclass
class MessageItem:
    """A message returned by a history query."""

    from_user_id: str = ""
    to_user_id: str = ""
    msg_seq: int = 0
    msg_random: int = 0
    msg_time_stamp: int = 0
    msg_flag_bits: int = 0
    msg_key: str = ""
    msg_body: list[MsgBody] = field(default_factory=list)
    cloud_custom_data: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MessageItem":
        """Build an item from its decoded wire form."""
        body = [
            MsgBody(msg_type=item.get("MsgType", ""), msg_content=item.get("MsgContent"))
            for item in data.get("MsgBody") or []
        ]
        return cls(
            from_user_id=data.get("From_Account") or "",
            to_user_id=data.get("To_Account") or "",
            msg_seq=int(data.get("MsgSeq") or 0),
            msg_random=int(data.get("MsgRandom") or 0),
            msg_time_stamp=int(data.get("MsgTimeStamp") or 0),
            msg_flag_bits=int(data.get("MsgFlagBits") or 0),
            msg_key=data.get("MsgKey") or "",
            msg_body=body,
            cloud_custom_data=data.get("CloudCustomData") or "",
        )


@dataclass
class FetchMessagesRet:
    """One page of a message history query."""

    last_msg_time: int = 0
    last_msg_key: str = ""
    count: int = 0
    has_more: bool = False
    messages: list[MessageItem] = field(default_factory=list)


@dataclass
class PullMessagesArg:
    """Parameters of a query that pulls every page of a message history."""

    from_user_id: str
    to_user_id: str
    max_limited: int
    min_time: int
    max_time: int


@dataclass
class UnreadMessageError:
    """A peer the unread count could not be queried for."""

    user_id: str = ""
    error_code: int = 0


@dataclass
class UnreadMessageNumRet:
    """Unread single-chat message counts of an account."""

    total: int = 0
    results: dict[str, int] = field(default_factory=dict)
    errors: list[UnreadMessageError] = field(default_factory=list)
    error: Optional[str] = None