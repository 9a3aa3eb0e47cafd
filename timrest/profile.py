"""Profile management: setting and fetching user profile attributes."""

from __future__ import annotations

from typing import Any

from .client import Client
from .enums import INVALID_PARAMS_CODE
from .errors import IMError
from .types import TagPair
from .user import User

SERVICE = "profile"
COMMAND_SET_PROFILE = "portrait_set"
COMMAND_GET_PROFILES = "portrait_get"


class Profile(User):
    """A user's profile."""

    def check_error(self) -> None:
        """Raise IMError if the user id is missing or an error was recorded."""
        if not self.user_id:
            raise IMError(INVALID_PARAMS_CODE, "the userid is not set")
        if self.error is not None:
            raise self.error


class ProfileAPI:
    """Calls of the profile service."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def set_profile(self, profile: Profile) -> None:
        """Save the standard and custom attributes of a profile."""
        profile.check_error()
        if not profile.attrs:
            raise IMError(INVALID_PARAMS_CODE, "the attributes is not set")
        req = {
            "From_Account": profile.user_id,
            "ProfileItem": [TagPair(tag=tag, value=value) for tag, value in profile.attrs.items()],
        }
        self.client.post(SERVICE, COMMAND_SET_PROFILE, req)

    def get_profiles(self, user_ids: list[str], attrs: list[str]) -> list[Profile]:
        """Fetch the given attributes of the given users."""
        req = {"To_Account": list(user_ids), "TagList": list(attrs)}
        resp: dict[str, Any] = self.client.post(SERVICE, COMMAND_GET_PROFILES, req)
        profiles = []
        for account in resp.get("UserProfileItem") or []:
            profile = Profile(account.get("To_Account", ""))
            profile.set_error(account.get("ResultCode") or 0, account.get("ResultInfo") or "")
            for item in account.get("ProfileItem") or []:
                profile.set_attr(item.get("Tag", ""), item.get("Value"))
            profiles.append(profile)
        return profiles