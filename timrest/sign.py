"""User signatures that authenticate calls to the REST interface."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import struct
import time
import zlib
from typing import Any, Optional


def base64_url_encode(data: bytes) -> str:
    """Base64-encode bytes with the URL-safe alphabet the service expects."""
    text = base64.b64encode(data).decode("ascii")
    return text.replace("+", "*").replace("/", "-").replace("=", "_")


def base64_url_decode(text: str) -> bytes:
    """Reverse base64_url_encode; raises binascii.Error on malformed input."""
    text = text.replace("_", "=").replace("-", "/").replace("*", "+")
    return base64.b64decode(text, validate=True)


def _u32(value: int) -> bytes:
    return struct.pack(">I", value & 0xFFFFFFFF)


def _u16(value: int) -> bytes:
    return struct.pack(">H", value & 0xFFFF)


def _user_buf(
    account: str,
    sdk_app_id: int,
    auth_id: int,
    expire: int,
    privilege_map: int,
    account_type: int,
    room: str,
    now: int,
) -> bytes:
    account_bytes = account.encode("utf-8")
    room_bytes = room.encode("utf-8")
    parts = [
        bytes([1 if room_bytes else 0]),
        _u16(len(account_bytes)),
        account_bytes,
        _u32(sdk_app_id),
        _u32(auth_id),
        _u32(now + expire),
        _u32(privilege_map),
        _u32(account_type),
    ]
    if room_bytes:
        parts.append(_u16(len(room_bytes)))
        parts.append(room_bytes)
    return b"".join(parts)


def _hmac_sha256(
    sdk_app_id: int,
    key: str,
    identifier: str,
    now: int,
    expire: int,
    user_buf: Optional[str],
) -> str:
    content = (
        f"TLS.identifier:{identifier}\n"
        f"TLS.sdkappid:{sdk_app_id}\n"
        f"TLS.time:{now}\n"
        f"TLS.expire:{expire}\n"
    )
    if user_buf is not None:
        content += f"TLS.userbuf:{user_buf}\n"
    digest = hmac.new(key.encode("utf-8"), content.encode("utf-8"), hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def _encode_json(doc: dict[str, Any]) -> bytes:
    text = json.dumps(doc, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    for char, escape in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return text.encode("utf-8")


def _sign(
    sdk_app_id: int,
    key: str,
    identifier: str,
    expire: int,
    user_buf: Optional[bytes],
    now: int,
) -> str:
    doc: dict[str, Any] = {
        "TLS.ver": "2.0",
        "TLS.identifier": identifier,
        "TLS.sdkappid": sdk_app_id,
        "TLS.expire": expire,
        "TLS.time": now,
    }
    if user_buf is not None:
        encoded_buf = base64.b64encode(user_buf).decode("ascii")
        doc["TLS.userbuf"] = encoded_buf
        doc["TLS.sig"] = _hmac_sha256(sdk_app_id, key, identifier, now, expire, encoded_buf)
    else:
        doc["TLS.sig"] = _hmac_sha256(sdk_app_id, key, identifier, now, expire, None)
    return base64_url_encode(zlib.compress(_encode_json(doc)))


def _now(now: Optional[int]) -> int:
    return int(time.time()) if now is None else int(now)


def gen_user_sig(
    sdk_app_id: int,
    key: str,
    identifier: str,
    expire: int,
    now: Optional[int] = None,
) -> str:
    """Generate a user signature valid for `expire` seconds from `now`."""
    return _sign(sdk_app_id, key, identifier, expire, None, _now(now))


def gen_private_map_key(
    sdk_app_id: int,
    key: str,
    identifier: str,
    expire: int,
    room_id: int,
    privilege_map: int,
    now: Optional[int] = None,
) -> str:
    """Generate a privilege key bound to a numeric room id."""
    current = _now(now)
    buf = _user_buf(identifier, sdk_app_id, room_id, expire, privilege_map, 0, "", current)
    return _sign(sdk_app_id, key, identifier, expire, buf, current)


def gen_private_map_key_with_room_id(
    sdk_app_id: int,
    key: str,
    identifier: str,
    expire: int,
    room_id: str,
    privilege_map: int,
    now: Optional[int] = None,
) -> str:
    """Generate a privilege key bound to a string room id."""
    current = _now(now)
    buf = _user_buf(identifier, sdk_app_id, 0, expire, privilege_map, 0, room_id, current)
    return _sign(sdk_app_id, key, identifier, expire, buf, current)