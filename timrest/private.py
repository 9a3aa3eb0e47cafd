"""Single-chat messages: sending, importing, querying, revoking and unread counts."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from typing import Any

from .client import Client
from .conv import to_string
from .private_message import (
    FetchMessagesArg,
    FetchMessagesRet,
    MessageItem,
    PrivateMessage,
    PullMessagesArg,
    SendMessageError,
    SendMessageRet,
    SendMessagesRet,
    UnreadMessageError,
    UnreadMessageNumRet,
)

SERVICE = "openim"
COMMAND_SEND_MESSAGE = "sendmsg"
COMMAND_SEND_MESSAGES = "batchsendmsg"
COMMAND_IMPORT_MESSAGE = "importmsg"
COMMAND_FETCH_MESSAGES = "admin_getroammsg"
COMMAND_REVOKE_MESSAGE = "admin_msgwithdraw"
COMMAND_SET_MESSAGE_READ = "admin_set_msg_read"
COMMAND_GET_UNREAD_MESSAGE_NUM = "get_c2c_unread_msg_num"


def _present(**optional: Any) -> dict[str, Any]:
    """Keep only the optional fields that hold a non-empty value."""
    return {key: value for key, value in optional.items() if value}


class PrivateAPI:
    """Calls of the single-chat message service."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def send_message(self, message: PrivateMessage) -> SendMessageRet:
        """Send a message to its first receiver."""
        message.validate()
        req: dict[str, Any] = {
            "To_Account": message.first_receiver,
            "MsgRandom": message.random,
            "MsgBody": message.body,
        }
        req.update(
            _present(
                From_Account=message.sender,
                MsgLifeTime=message.life_time,
                MsgSeq=message.serial_no,
                MsgTimeStamp=message.timestamp,
                SyncOtherMachine=message.sync_other_machine,
                CloudCustomData=to_string(message.custom_data),
                SendMsgControl=message.send_msg_control,
                ForbidCallbackControl=message.forbid_callback_control,
                OfflinePushInfo=message.offline_push_info,
            )
        )
        resp = self.client.post(SERVICE, COMMAND_SEND_MESSAGE, req)
        return SendMessageRet(
            msg_key=resp.get("MsgKey") or "",
            msg_time=int(resp.get("MsgTime") or 0),
        )

    def send_messages(self, message: PrivateMessage) -> SendMessagesRet:
        """Send a message to all of its receivers at once."""
        message.validate()
        req: dict[str, Any] = {
            "To_Account": message.receivers,
            "MsgRandom": message.random,
            "MsgBody": message.body,
        }
        req.update(
            _present(
                From_Account=message.sender,
                MsgSeq=message.serial_no,
                SyncOtherMachine=message.sync_other_machine,
                CloudCustomData=to_string(message.custom_data),
                SendMsgControl=message.send_msg_control,
                OfflinePushInfo=message.offline_push_info,
            )
        )
        resp = self.client.post(SERVICE, COMMAND_SEND_MESSAGES, req)
        errors = [
            SendMessageError(
                user_id=item.get("To_Account") or "",
                error_code=int(item.get("ErrorCode") or 0),
            )
            for item in resp.get("ErrorList") or []
        ]
        return SendMessagesRet(msg_key=resp.get("MsgKey") or "", errors=errors)

    def import_message(self, message: PrivateMessage) -> None:
        """Import a historical message for its first receiver."""
        message.validate()
        req: dict[str, Any] = {
            "To_Account": message.first_receiver,
            "MsgRandom": message.random,
            "MsgBody": message.body,
        }
        req.update(
            _present(
                From_Account=message.sender,
                MsgSeq=message.serial_no,
                MsgTimeStamp=message.timestamp,
                SyncFromOldSystem=message.sync_other_machine,
                CloudCustomData=to_string(message.custom_data),
            )
        )
        self.client.post(SERVICE, COMMAND_IMPORT_MESSAGE, req)

    def fetch_messages(self, arg: FetchMessagesArg) -> FetchMessagesRet:
        """Query one page of a conversation's message history."""
        resp = self.client.post(SERVICE, COMMAND_FETCH_MESSAGES, arg.to_payload())
        return FetchMessagesRet(
            last_msg_time=int(resp.get("LastMsgTime") or 0),
            last_msg_key=resp.get("LastMsgKey") or "",
            count=int(resp.get("MsgCnt") or 0),
            has_more=int(resp.get("Complete") or 0) != 1,
            messages=[MessageItem.from_dict(item) for item in resp.get("MsgList") or []],
        )

    def pull_messages(self, arg: PullMessagesArg) -> Iterator[FetchMessagesRet]:
        """Yield every page of a conversation's message history, in order."""
        req = FetchMessagesArg(
            from_user_id=arg.from_user_id,
            to_user_id=arg.to_user_id,
            max_limited=arg.max_limited,
            min_time=arg.min_time,
            max_time=arg.max_time,
        )
        while True:
            ret = self.fetch_messages(req)
            yield ret
            if not ret.has_more:
                return
            req = dataclasses.replace(
                req, last_msg_key=ret.last_msg_key, max_time=ret.last_msg_time
            )

    def revoke_message(self, from_user_id: str, to_user_id: str, msg_key: str) -> None:
        """Withdraw a message identified by its key."""
        req = {"From_Account": from_user_id, "To_Account": to_user_id, "MsgKey": msg_key}
        self.client.post(SERVICE, COMMAND_REVOKE_MESSAGE, req)

    def set_message_read(self, user_id: str, peer_user_id: str) -> None:
        """Mark every message of a conversation as read for a user."""
        req = {"Report_Account": user_id, "Peer_Account": peer_user_id}
        self.client.post(SERVICE, COMMAND_SET_MESSAGE_READ, req)

    def get_unread_message_num(self, user_id: str, *peer_user_ids: str) -> UnreadMessageNumRet:
        """Return a user's total unread count and, per given peer, its unread count."""
        req: dict[str, Any] = {"To_Account": user_id}
        if peer_user_ids:
            req["Peer_Account"] = list(peer_user_ids)
        resp = self.client.post(SERVICE, COMMAND_GET_UNREAD_MESSAGE_NUM, req)
        results = {
            item.get("Peer_Account") or "": int(item.get("C2CUnreadMsgNum") or 0)
            for item in resp.get("C2CUnreadMsgNumList") or []
        }
        errors = [
            UnreadMessageError(
                user_id=item.get("Peer_Account") or "",
                error_code=int(item.get("ErrorCode") or 0),
            )
            for item in resp.get("ErrorList") or []
        ]
        return UnreadMessageNumRet(
            total=int(resp.get("AllC2CUnreadMsgNum") or 0),
            results=results,
            errors=errors,
        )