"""HTTP client that signs and sends calls to the REST interface."""

from __future__ import annotations

import json
import random
import time
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .enums import INVALID_RESPONSE_CODE, SUCCESS_CODE, ActionStatus
from .errors import IMError
from .sign import gen_user_sig
from .types import to_payload

DEFAULT_BASE_URL = "https://adminapiger.im.qcloud.com"
DEFAULT_VERSION = "v4"
DEFAULT_CONTENT_TYPE = "json"
DEFAULT_EXPIRATION = 3600

Transport = Callable[[str, str, Any], Any]


@dataclass
class Options:
    """Credentials and settings of a client."""

    app_id: int
    app_secret: str
    user_id: str
    expiration: int = 0
    base_url: str = ""


def _http_transport(method: str, url: str, payload: Any) -> Any:
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    request = urllib.request.Request(
        url, data=body, method=method, headers={"Content-Type": "application/json"}
    )
    with urllib.request.urlopen(request) as response:
        raw = response.read()
    return json.loads(raw) if raw else None


def check_response(data: Any, action: bool = True) -> Any:
    """Raise IMError if a decoded response reports a failure; return it otherwise."""
    if not isinstance(data, Mapping):
        raise IMError(INVALID_RESPONSE_CODE, "invalid response")
    code = data.get("ErrorCode") or SUCCESS_CODE
    info = data.get("ErrorInfo") or ""
    if action and data.get("ActionStatus") == ActionStatus.FAIL.value:
        raise IMError(code, info)
    if code != SUCCESS_CODE:
        raise IMError(code, info)
    return data


class Client:
    """Sends signed JSON requests; the transport does the actual HTTP exchange."""

    def __init__(self, options: Options, transport: Optional[Transport] = None) -> None:
        self.options = options
        self.base_url = (options.base_url or DEFAULT_BASE_URL).rstrip("/")
        self._transport = transport or _http_transport
        self._random = random.Random()
        self._user_sig = ""
        self._user_sig_expire_at = 0

    def request(self, method: str, service: str, command: str, data: Any) -> Any:
        """Send a request and return the checked, decoded response."""
        url = self.base_url + self.build_url(service, command)
        response = self._transport(method, url, to_payload(data))
        return check_response(response)

    def get(self, service: str, command: str, data: Any) -> Any:
        return self.request("GET", service, command, data)

    def post(self, service: str, command: str, data: Any) -> Any:
        return self.request("POST", service, command, data)

    def put(self, service: str, command: str, data: Any) -> Any:
        return self.request("PUT", service, command, data)

    def patch(self, service: str, command: str, data: Any) -> Any:
        return self.request("PATCH", service, command, data)

    def delete(self, service: str, command: str, data: Any) -> Any:
        return self.request("DELETE", service, command, data)

    def build_url(self, service: str, command: str) -> str:
        """Return the path and query of a call, relative to the base URL."""
        opt = self.options
        return (
            f"/{DEFAULT_VERSION}/{service}/{command}"
            f"?sdkappid={opt.app_id}&identifier={opt.user_id}"
            f"&usersig={self.user_sig()}&random={self._random.randint(0, 2**31 - 1)}"
            f"&contenttype={DEFAULT_CONTENT_TYPE}"
        )

    def user_sig(self) -> str:
        """Return the cached signature, regenerating it once it has expired."""
        now = int(time.time())
        expiration = self.options.expiration
        if expiration <= 0:
            expiration = DEFAULT_EXPIRATION
        if not self._user_sig or self._user_sig_expire_at <= now:
            self._user_sig = gen_user_sig(
                self.options.app_id,
                self.options.app_secret,
                self.options.user_id,
                expiration,
                now,
            )
            self._user_sig_expire_at = now + expiration
        return self._user_sig