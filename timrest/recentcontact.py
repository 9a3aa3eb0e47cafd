"""Recent contacts: paging through and deleting a user's conversations."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from typing import Any

from .client import Client
from .session_models import (
    FetchSessionsArg,
    FetchSessionsRet,
    PullSessionsArg,
    SessionItem,
    SessionType,
)

SERVICE = "recentcontact"
COMMAND_FETCH_SESSIONS = "get_list"
COMMAND_DELETE_SESSION = "delete"


class RecentContactAPI:
    """Calls of the recent-contact service."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def fetch_sessions(self, arg: FetchSessionsArg) -> FetchSessionsRet:
        """Fetch one page of a user's conversation list."""
        resp = self.client.post(SERVICE, COMMAND_FETCH_SESSIONS, arg.to_payload())
        return FetchSessionsRet(
            time_stamp=int(resp.get("TimeStamp") or 0),
            start_index=int(resp.get("StartIndex") or 0),
            top_time_stamp=int(resp.get("TopTimeStamp") or 0),
            top_start_index=int(resp.get("TopStartIndex") or 0),
            has_more=int(resp.get("CompleteFlag") or 0) == 0,
            sessions=[SessionItem.from_dict(item) for item in resp.get("SessionItem") or []],
        )

    def pull_sessions(self, arg: PullSessionsArg) -> Iterator[FetchSessionsRet]:
        """Yield every page of a user's conversation list, in order."""
        req = FetchSessionsArg(
            user_id=arg.user_id,
            is_allow_top_session=arg.is_allow_top_session,
            is_return_empty_session=arg.is_return_empty_session,
            is_allow_top_session_paging=arg.is_allow_top_session_paging,
        )
        while True:
            ret = self.fetch_sessions(req)
            yield ret
            if not ret.has_more:
                return
            req = dataclasses.replace(
                req,
                time_stamp=ret.time_stamp,
                start_index=ret.start_index,
                top_time_stamp=ret.top_time_stamp,
                top_start_index=ret.top_start_index,
            )

    def delete_session(
        self,
        from_user_id: str,
        to_user_id: str,
        session_type: SessionType,
        clear_ramble: bool = False,
    ) -> None:
        """Delete one conversation, optionally clearing its roaming messages."""
        req: dict[str, Any] = {
            "From_Account": from_user_id,
            "type": session_type,
            "To_Account": to_user_id,
        }
        if clear_ramble:
            req["ClearRamble"] = 1
        self.client.post(SERVICE, COMMAND_DELETE_SESSION, req)