"""Records exchanged by the recent-contact (session list) calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping, Union


class SessionType(IntEnum):
    """Kind of a conversation."""

    C2C = 1
    G2C = 2


@dataclass
class FetchSessionsArg:
    """Parameters of one page of a session list query."""

    user_id: str
    time_stamp: int = 0
    start_index: int = 0
    top_time_stamp: int = 0
    top_start_index: int = 0
    is_allow_top_session: bool = False
    is_return_empty_session: bool = False
    is_allow_top_session_paging: bool = False

    @property
    def assist_flags(self) -> int:
        """The flag bits: pinned sessions, empty sessions, pinned-session paging."""
        flags = 0
        if self.is_allow_top_session:
            flags |= 1 << 0
        if self.is_return_empty_session:
            flags |= 1 << 1
        if self.is_allow_top_session_paging:
            flags |= 1 << 2
        return flags

    def to_payload(self) -> dict[str, Any]:
        """Return the request body of the query."""
        return {
            "From_Account": self.user_id,
            "TimeStamp": self.time_stamp,
            "StartIndex": self.start_index,
            "TopTimeStamp": self.top_time_stamp,
            "TopStartIndex": self.top_start_index,
            "AssistFlags": self.assist_flags,
        }


@dataclass
class PullSessionsArg:
    """Parameters of a query that pulls every page of a session list."""

    user_id: str
    is_allow_top_session: bool = False
    is_return_empty_session: bool = False
    is_allow_top_session_paging: bool = False


@dataclass
class SessionItem:
    """A conversation in a session list."""

    type: Union[SessionType, int] = 0
    user_id: str = ""
    group_id: str = ""
    msg_time: int = 0
    top_flag: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SessionItem":
        """Build an item from its decoded wire form."""
        raw_type = int(data.get("Type") or 0)
        try:
            session_type: Union[SessionType, int] = SessionType(raw_type)
        except ValueError:
            session_type = raw_type
        return cls(
            type=session_type,
            user_id=data.get("To_Account") or "",
            group_id=data.get("GroupId") or "",
            msg_time=int(data.get("MsgTime") or 0),
            top_flag=int(data.get("TopFlag") or 0),
        )


@dataclass
class FetchSessionsRet:
    """One page of a session list and where the next page starts."""

    time_stamp: int = 0
    start_index: int = 0
    top_time_stamp: int = 0
    top_start_index: int = 0
    has_more: bool = False
    sessions: list[SessionItem] = field(default_factory=list)