"""Login session state kept alive between windows and the sync-check URL."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["REQUIRED_LOGIN_KEYS", "SYNC_CHECK_URL", "LoginSession"]

REQUIRED_LOGIN_KEYS = (
    "skey",
    "wxsid",
    "wxuin",
    "pass_ticket",
    "webwx_data_ticket",
    "webwx_auth_ticket",
)

SYNC_CHECK_URL = (
    "https://webpush.wx.qq.com/cgi-bin/mmwebwx-bin/synccheck"
    "?skey={skey}&sid={sid}&uin={uin}&deviceid={deviceid}&synckey={synckey}&r={r}&_={ts}"
)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_dict(value: Any) -> dict:
    return dict(value) if isinstance(value, Mapping) else {}


@dataclass
class LoginSession:
    """Holds the login and user information and the current sync key."""

    login_info: dict = field(default_factory=dict)
    user_info: dict = field(default_factory=dict)
    sync_key: str = ""

    def set_login_data(self, data: Any = None) -> None:
        """Store ``user_info`` and ``login_info`` from *data*.

        A missing part is cleared; data that is not a mapping is ignored.
        """
        if not isinstance(data, Mapping):
            return
        self.user_info = _as_dict(data["user_info"]) if "user_info" in data else {}
        self.login_info = _as_dict(data["login_info"]) if "login_info" in data else {}

    def get_login_data(self) -> Optional[dict]:
        """Return both parts, or ``None`` when nothing is stored."""
        if not self.login_info and not self.user_info:
            return None
        return {"user_info": dict(self.user_info), "login_info": dict(self.login_info)}

    def is_valid(self) -> bool:
        """Whether every required login key holds a non-empty value."""
        return all(_text(self.login_info.get(key)) for key in REQUIRED_LOGIN_KEYS)

    def set_sync_key(self, value: Any) -> None:
        """Set the sync key from a string or a ``{"List": [{"Key", "Val"}]}`` mapping."""
        if isinstance(value, (str, int, float)):
            self.sync_key = _text(value)
        elif isinstance(value, Mapping):
            entries = value.get("List") or []
            self.sync_key = "|".join(
                f"{_text(_as_dict(e).get('Key'))}_{_text(_as_dict(e).get('Val'))}"
                for e in entries
            )
        else:
            self.sync_key = ""

    def sync_check_url(self, timestamp: Optional[int] = None) -> str:
        """Return the sync-check URL; *timestamp* is in milliseconds."""
        ts = int(time.time() * 1000) if timestamp is None else int(timestamp)
        info = self.login_info
        return SYNC_CHECK_URL.format(
            skey=_text(info.get("skey")),
            sid=_text(info.get("wxsid")),
            uin=_text(info.get("wxuin")),
            deviceid=_text(info.get("deviceId")),
            synckey=self.sync_key,
            r=ts,
            ts=ts,
        )