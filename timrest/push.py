"""Broadcast push to all members, and the user attributes and tags it targets."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .client import Client
from .enums import INVALID_PARAMS_CODE
from .errors import IMError
from .message import Message

SERVICE = "all_member_push"
COMMAND_PUSH_MESSAGE = "im_push"
COMMAND_SET_ATTR_NAMES = "im_set_attr_name"
COMMAND_GET_ATTR_NAMES = "im_get_attr_name"
COMMAND_GET_USER_ATTRS = "im_get_attr"
COMMAND_SET_USER_ATTRS = "im_set_attr"
COMMAND_DELETE_USER_ATTRS = "im_remove_attr"
COMMAND_GET_USER_TAGS = "im_get_tag"
COMMAND_ADD_USER_TAGS = "im_add_tag"
COMMAND_DELETE_USER_TAGS = "im_remove_tag"
COMMAND_DELETE_USER_ALL_TAGS = "im_remove_all_tags"

BATCH_SET_ATTR_NAMES_LIMIT = 10
BATCH_GET_USER_ATTRS_LIMIT = 100
BATCH_SET_USER_ATTRS_LIMIT = 100
BATCH_DELETE_USER_ATTRS_LIMIT = 100
BATCH_ADD_USER_TAGS_LIMIT = 100
BATCH_GET_USER_TAGS_LIMIT = 100
BATCH_DELETE_USER_TAGS_LIMIT = 100
BATCH_DELETE_USER_ALL_TAGS_USER_LIMIT = 100


@dataclass
class PushCondition:
    """Who a broadcast reaches: by tags or by attributes, never both."""

    tags_and: Optional[list[str]] = None
    tags_or: Optional[list[str]] = None
    attrs_and: Optional[dict[str, Any]] = None
    attrs_or: Optional[dict[str, Any]] = None

    @property
    def has_tags(self) -> bool:
        return self.tags_and is not None or self.tags_or is not None

    @property
    def has_attrs(self) -> bool:
        return self.attrs_and is not None or self.attrs_or is not None

    def to_payload(self) -> dict[str, Any]:
        """Return the wire form of the condition."""

        def copy(value: Any) -> Any:
            if value is None:
                return None
            return list(value) if isinstance(value, list) else dict(value)

        return {
            "TagsAnd": copy(self.tags_and),
            "TagsOr": copy(self.tags_or),
            "AttrsAnd": copy(self.attrs_and),
            "AttrsOr": copy(self.attrs_or),
        }


class PushMessage(Message):
    """A broadcast message with an optional targeting condition."""

    def __init__(self, sender: str = "", life_time: int = 0) -> None:
        super().__init__(sender=sender, life_time=life_time)
        self.condition: Optional[PushCondition] = None

    def _condition(self) -> PushCondition:
        if self.condition is None:
            self.condition = PushCondition()
        return self.condition

    def set_condition_tags_or(self, *tags: str) -> None:
        """Replace the tags of which any one must match."""
        self._condition().tags_or = []
        self.add_condition_tags_or(*tags)

    def add_condition_tags_or(self, *tags: str) -> None:
        """Add tags of which any one must match."""
        cond = self._condition()
        if cond.tags_or is None:
            cond.tags_or = []
        cond.tags_or.extend(tags)

    def set_condition_tags_and(self, *tags: str) -> None:
        """Replace the tags that must all match."""
        self._condition().tags_and = []
        self.add_condition_tags_and(*tags)

    def add_condition_tags_and(self, *tags: str) -> None:
        """Add tags that must all match."""
        cond = self._condition()
        if cond.tags_and is None:
            cond.tags_and = []
        cond.tags_and.extend(tags)

    def set_condition_attrs_or(self, attrs: Mapping[str, Any]) -> None:
        """Replace the attributes of which any one must match."""
        self._condition().attrs_or = {}
        self.add_condition_attrs_or(attrs)

    def add_condition_attrs_or(self, attrs: Mapping[str, Any]) -> None:
        """Add attributes of which any one must match."""
        cond = self._condition()
        if cond.attrs_or is None:
            cond.attrs_or = {}
        cond.attrs_or.update(attrs)

    def set_condition_attrs_and(self, attrs: Mapping[str, Any]) -> None:
        """Replace the attributes that must all match."""
        self._condition().attrs_and = {}
        self.add_condition_attrs_and(attrs)

    def add_condition_attrs_and(self, attrs: Mapping[str, Any]) -> None:
        """Add attributes that must all match."""
        cond = self._condition()
        if cond.attrs_and is None:
            cond.attrs_and = {}
        cond.attrs_and.update(attrs)

    def validate(self) -> None:
        """Raise ValueError if the body is invalid or tags and attributes are both set."""
        super().validate()
        cond = self.condition
        if cond is not None and cond.has_attrs and cond.has_tags:
            raise ValueError("attrs and tags condition cannot be set at the same time")


def _check_count(items: Sized_, empty: str, too_many: str, limit: int) -> None:
    count = len(items)
    if count == 0:
        raise IMError(INVALID_PARAMS_CODE, empty)
    if count > limit:
        raise IMError(INVALID_PARAMS_CODE, f"{too_many} {limit}")


Sized_ = Any


class PushAPI:
    """Calls of the all-member push service."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def push_message(self, message: PushMessage) -> str:
        """Broadcast a message and return the push task id."""
        message.validate()
        req: dict[str, Any] = {"MsgRandom": message.random, "MsgBody": message.body}
        if message.sender:
            req["From_Account"] = message.sender
        if message.condition is not None:
            req["Condition"] = message.condition.to_payload()
        if message.life_time:
            req["MsgLifeTime"] = message.life_time
        info = message.offline_push_info
        if info is not None:
            req["OfflinePushInfo"] = info
        resp = self.client.post(SERVICE, COMMAND_PUSH_MESSAGE, req)
        return resp.get("TaskId") or ""

    def set_attr_names(self, attr_names: Mapping[int, str]) -> None:
        """Name the application's user attributes by index."""
        _check_count(
            attr_names,
            "the attribute names is not set",
            "the number of attribute names to be set cannot exceed",
            BATCH_SET_ATTR_NAMES_LIMIT,
        )
        req = {"AttrNames": {str(index): name for index, name in attr_names.items()}}
        self.client.post(SERVICE, COMMAND_SET_ATTR_NAMES, req)

    def get_attr_names(self) -> dict[int, str]:
        """Return the application's attribute names by index."""
        resp = self.client.post(SERVICE, COMMAND_GET_ATTR_NAMES, {})
        names: dict[int, str] = {}
        for key, name in (resp.get("AttrNames") or {}).items():
            try:
                index = int(key)
            except (TypeError, ValueError):
                index = 0
            names[index] = name
        return names

    def get_user_attrs(self, *user_ids: str) -> dict[str, dict[str, Any]]:
        """Return the attributes of the given users."""
        _check_count(
            user_ids,
            "the accounts is not set",
            "the number of accounts being queried cannot exceed",
            BATCH_GET_USER_ATTRS_LIMIT,
        )
        resp = self.client.post(SERVICE, COMMAND_GET_USER_ATTRS, {"To_Account": list(user_ids)})
        return {
            item.get("To_Account") or "": dict(item.get("Attrs") or {})
            for item in resp.get("Attrs") or []
        }

    def set_user_attrs(self, user_attrs: Mapping[str, Mapping[str, Any]]) -> None:
        """Set attributes of users, keyed by user id."""
        _check_count(
            user_attrs,
            "the attributes is not set",
            "the number of attributes to be set cannot exceed",
            BATCH_SET_USER_ATTRS_LIMIT,
        )
        req = {
            "Attrs": [
                {"To_Account": user_id, "Attrs": dict(attrs)}
                for user_id, attrs in user_attrs.items()
            ]
        }
        self.client.post(SERVICE, COMMAND_SET_USER_ATTRS, req)

    def delete_user_attrs(self, user_attrs: Mapping[str, Sequence[str]]) -> None:
        """Delete the named attributes of users, keyed by user id."""
        _check_count(
            user_attrs,
            "the attributes is not set",
            "the number of attributes to be delete cannot exceed",
            BATCH_DELETE_USER_ATTRS_LIMIT,
        )
        req = {
            "Attrs": [
                {"To_Account": user_id, "Attrs": list(attrs)}
                for user_id, attrs in user_attrs.items()
            ]
        }
        self.client.post(SERVICE, COMMAND_DELETE_USER_ATTRS, req)

    def get_user_tags(self, *user_ids: str) -> dict[str, list[str]]:
        """Return the tags of the given users."""
        _check_count(
            user_ids,
            "the accounts is not set",
            "the number of tags being queried cannot exceed",
            BATCH_GET_USER_TAGS_LIMIT,
        )
        resp = self.client.post(SERVICE, COMMAND_GET_USER_TAGS, {"To_Account": list(user_ids)})
        return {
            item.get("To_Account") or "": list(item.get("Tags") or [])
            for item in resp.get("Tags") or []
        }

    def add_user_tags(self, user_tags: Mapping[str, Sequence[str]]) -> None:
        """Add tags to users, keyed by user id."""
        _check_count(
            user_tags,
            "the tags of user is not set",
            "the number of tags to be add cannot exceed",
            BATCH_ADD_USER_TAGS_LIMIT,
        )
        req = {
            "Tags": [
                {"To_Account": user_id, "Tags": list(tags)} for user_id, tags in user_tags.items()
            ]
        }
        self.client.post(SERVICE, COMMAND_ADD_USER_TAGS, req)

    def delete_user_tags(self, user_tags: Mapping[str, Sequence[str]]) -> None:
        """Remove tags from users, keyed by user id."""
        _check_count(
            user_tags,
            "the tags of user is not set",
            "the number of tags to be delete cannot exceed",
            BATCH_DELETE_USER_TAGS_LIMIT,
        )
        req = {
            "Tags": [
                {"To_Account": user_id, "Tags": list(tags)} for user_id, tags in user_tags.items()
            ]
        }
        self.client.post(SERVICE, COMMAND_DELETE_USER_TAGS, req)

    def delete_user_all_tags(self, *user_ids: str) -> None:
        """Remove every tag of the given users."""
        _check_count(
            user_ids,
            "the accounts is not set",
            "the number of accounts to be delete cannot exceed",
            BATCH_DELETE_USER_ALL_TAGS_USER_LIMIT,
        )
        self.client.post(SERVICE, COMMAND_DELETE_USER_ALL_TAGS, {"To_Account": list(user_ids)})