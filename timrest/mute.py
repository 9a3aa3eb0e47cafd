"""Global mute management of accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .client import Client

SERVICE = "openconfigsvr"
COMMAND_SET_NO_SPEAKING = "setnospeaking"
COMMAND_GET_NO_SPEAKING = "getnospeaking"

# A mute time of this many seconds means the account is muted for good; 0 means not muted.
PERMANENT_MUTE = 0xFFFFFFFF


@dataclass
class NoSpeaking:
    """Mute durations of an account, in seconds."""

    private_mute_time: int = 0
    group_mute_time: int = 0


class MuteAPI:
    """Calls that set and query global mutes."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def set_no_speaking(
        self,
        user_id: str,
        private_mute_time: Optional[int] = None,
        group_mute_time: Optional[int] = None,
    ) -> None:
        """Mute an account in single chats and/or groups; None leaves a setting unchanged."""
        req: dict[str, Any] = {"Set_Account": user_id}
        if private_mute_time is not None:
            req["C2CmsgNospeakingTime"] = private_mute_time
        if group_mute_time is not None:
            req["GroupmsgNospeakingTime"] = group_mute_time
        self.client.post(SERVICE, COMMAND_SET_NO_SPEAKING, req)

    def get_no_speaking(self, user_id: str) -> NoSpeaking:
        """Return the mute durations of an account."""
        resp = self.client.post(SERVICE, COMMAND_GET_NO_SPEAKING, {"Get_Account": user_id})
        return NoSpeaking(
            private_mute_time=int(resp.get("C2CmsgNospeakingTime") or 0),
            group_mute_time=int(resp.get("GroupmsgNospeakingTime") or 0),
        )