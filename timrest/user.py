"""A user account with its profile attributes."""

from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from .enums import (
    CUSTOM_ATTR_PREFIX,
    INVALID_PARAMS_CODE,
    STANDARD_ATTR_ADMIN_FORBID_TYPE,
    STANDARD_ATTR_ALLOW_TYPE,
    STANDARD_ATTR_AVATAR,
    STANDARD_ATTR_BIRTHDAY,
    STANDARD_ATTR_GENDER,
    STANDARD_ATTR_LANGUAGE,
    STANDARD_ATTR_LEVEL,
    STANDARD_ATTR_LOCATION,
    STANDARD_ATTR_MSG_SETTINGS,
    STANDARD_ATTR_NICKNAME,
    STANDARD_ATTR_ROLE,
    STANDARD_ATTR_SIGNATURE,
    SUCCESS_CODE,
    AdminForbidType,
    AllowType,
    GenderType,
)
from .errors import IMError

E = TypeVar("E", bound=Enum)

_LOCATION_PART = re.compile(r"[+-]?\d+")


class User:
    """A user id, its attributes keyed by tag, and an error reported for it."""

    def __init__(self, user_id: str = "") -> None:
        self.user_id = user_id
        self._attrs: dict[str, Any] = {}
        self._error: Optional[IMError] = None

    def set_attr(self, name: str, value: Any) -> None:
        self._attrs[name] = value

    def get_attr(self, name: str) -> Any:
        """Return an attribute's value, or None if it is not set."""
        return self._attrs.get(name)

    @property
    def attrs(self) -> dict[str, Any]:
        return self._attrs

    def _number(self, name: str) -> Optional[int]:
        value = self._attrs.get(name)
        return None if value is None else int(value)

    def _enum(self, cls: type[E], name: str) -> Any:
        value = self._attrs.get(name)
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return value

    @property
    def nickname(self) -> Optional[str]:
        return self._attrs.get(STANDARD_ATTR_NICKNAME)

    @nickname.setter
    def nickname(self, value: str) -> None:
        self.set_attr(STANDARD_ATTR_NICKNAME, value)

    @property
    def gender(self) -> Any:
        return self._enum(GenderType, STANDARD_ATTR_GENDER)

    @gender.setter
    def gender(self, value: GenderType) -> None:
        self.set_attr(STANDARD_ATTR_GENDER, value)

    @property
    def birthday(self) -> Optional[date]:
        value = self._attrs.get(STANDARD_ATTR_BIRTHDAY)
        if value is None or value == "":
            return None
        try:
            return datetime.strptime(str(value), "%Y%m%d").date()
        except ValueError:
            return None

    @birthday.setter
    def birthday(self, value: date) -> None:
        self.set_attr(STANDARD_ATTR_BIRTHDAY, int(value.strftime("%Y%m%d")))

    @property
    def signature(self) -> Optional[str]:
        return self._attrs.get(STANDARD_ATTR_SIGNATURE)

    @signature.setter
    def signature(self, value: str) -> None:
        self.set_attr(STANDARD_ATTR_SIGNATURE, value)

    @property
    def allow_type(self) -> Any:
        return self._enum(AllowType, STANDARD_ATTR_ALLOW_TYPE)

    @allow_type.setter
    def allow_type(self, value: AllowType) -> None:
        self.set_attr(STANDARD_ATTR_ALLOW_TYPE, value)

    @property
    def language(self) -> Optional[int]:
        return self._number(STANDARD_ATTR_LANGUAGE)

    @language.setter
    def language(self, value: int) -> None:
        self.set_attr(STANDARD_ATTR_LANGUAGE, value)

    @property
    def avatar(self) -> Optional[str]:
        return self._attrs.get(STANDARD_ATTR_AVATAR)

    @avatar.setter
    def avatar(self, value: str) -> None:
        self.set_attr(STANDARD_ATTR_AVATAR, value)

    @property
    def msg_settings(self) -> Optional[int]:
        return self._number(STANDARD_ATTR_MSG_SETTINGS)

    @msg_settings.setter
    def msg_settings(self, value: int) -> None:
        self.set_attr(STANDARD_ATTR_MSG_SETTINGS, value)

    @property
    def admin_forbid_type(self) -> Any:
        return self._enum(AdminForbidType, STANDARD_ATTR_ADMIN_FORBID_TYPE)

    @admin_forbid_type.setter
    def admin_forbid_type(self, value: AdminForbidType) -> None:
        self.set_attr(STANDARD_ATTR_ADMIN_FORBID_TYPE, value)

    @property
    def level(self) -> Optional[int]:
        return self._number(STANDARD_ATTR_LEVEL)

    @level.setter
    def level(self, value: int) -> None:
        self.set_attr(STANDARD_ATTR_LEVEL, value)

    @property
    def role(self) -> Optional[int]:
        return self._number(STANDARD_ATTR_ROLE)

    @role.setter
    def role(self, value: int) -> None:
        self.set_attr(STANDARD_ATTR_ROLE, value)

    def set_location(self, country: int, province: int, city: int, region: int) -> None:
        """Store the location as four zero-padded four-digit codes.

        A code of more than four digits records an invalid-parameter error.
        """
        parts = []
        for code in (country, province, city, region):
            text = str(code)
            if code < 0 or len(text) > 4:
                self.set_error(INVALID_PARAMS_CODE, "invalid location params")
                break
            parts.append(text.zfill(4))
        self.set_attr(STANDARD_ATTR_LOCATION, "".join(parts))

    @property
    def location(self) -> Optional[tuple[int, int, int, int]]:
        """The (country, province, city, region) codes, or None if unset or malformed."""
        value = self._attrs.get(STANDARD_ATTR_LOCATION)
        if not isinstance(value, str) or len(value) != 16:
            return None
        codes = []
        for start in range(0, 16, 4):
            chunk = value[start:start + 4]
            if not _LOCATION_PART.fullmatch(chunk):
                return None
            code = int(chunk)
            if code < 0:
                return None
            codes.append(code)
        return tuple(codes)  # type: ignore[return-value]

    def set_custom_attr(self, name: str, value: Any) -> None:
        self.set_attr(f"{CUSTOM_ATTR_PREFIX}_{name}", value)

    def get_custom_attr(self, name: str) -> Any:
        return self.get_attr(f"{CUSTOM_ATTR_PREFIX}_{name}")

    def set_error(self, code: int, message: str) -> None:
        """Record an error unless the code means success."""
        if code != SUCCESS_CODE:
            self._error = IMError(code, message)

    @property
    def error(self) -> Optional[IMError]:
        return self._error

    @property
    def is_valid(self) -> bool:
        return self._error is None