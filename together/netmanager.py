"""HTTP access with per-site default headers and a shared cookie jar."""

from __future__ import annotations

import calendar
import functools
import http.cookiejar
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

__all__ = [
    "SPECIAL_PATHS",
    "DEFAULT_USER_AGENT",
    "DEFAULT_REFERER",
    "DEFAULT_TIMEOUT",
    "RequestHeaders",
    "NetworkAccessManager",
    "CookieJar",
]

SPECIAL_PATHS = ("wx", "qq", "wexin", "wechat")
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_6) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/63.0.3239.84 Safari/537.36"
)
DEFAULT_REFERER = "https://wx.qq.com/"
DEFAULT_TIMEOUT = 30.0

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

HeaderSpec = Union[Mapping[str, Any], Iterable[Mapping[str, Any]], None]


def _header_items(headers: HeaderSpec) -> list[tuple[str, str]]:
    """Normalise a mapping or a list of ``{"name", "value"}`` dicts."""
    if headers is None:
        return []
    if isinstance(headers, Mapping):
        return [(str(k), str(v)) for k, v in headers.items()]
    items = []
    for entry in headers:
        if not isinstance(entry, Mapping):
            continue
        items.append((str(entry.get("name", "")), str(entry.get("value", ""))))
    return items


class RequestHeaders:
    """Ordered default headers applied to requests whose URL matches a path."""

    def __init__(self) -> None:
        self._headers: dict[str, str] = {}
        self._paths: list[str] = []
        self.method = ""

    def add_header(self, name: str, value: str) -> None:
        """Add a header, replacing the value in place if it already exists."""
        self._headers[name] = value

    def remove_header(self, name: str) -> None:
        self._headers.pop(name, None)

    def clear_headers(self) -> None:
        self._headers.clear()

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def headers(self) -> list[tuple[str, str]]:
        return list(self._headers.items())

    def add_path(self, path: str) -> None:
        if path not in self._paths:
            self._paths.append(path)

    def set_paths(self, paths: Iterable[str]) -> None:
        self._paths = list(paths)

    def paths(self) -> list[str]:
        return list(self._paths)

    def apply(self, url: str, request_headers: dict[str, str]) -> bool:
        """Fill in missing headers when *url* contains one of the paths.

        Headers already in *request_headers* (compared case-insensitively)
        are left alone. Returns whether the URL matched.
        """
        if not url:
            return False
        if not any(path in url for path in self._paths):
            return False
        present = {name.lower() for name in request_headers}
        for name, value in self._headers.items():
            if name.lower() in present:
                continue
            request_headers[name] = value
            present.add(name.lower())
        return True


def _format_expires(expires: int) -> str:
    t = time.gmtime(expires)
    return (f"{_WEEKDAYS[t.tm_wday]}, {t.tm_mday:02d}-{_MONTHS[t.tm_mon - 1]}-"
            f"{t.tm_year:04d} {t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d} GMT")


def _parse_cookie(line: str) -> Optional[http.cookiejar.Cookie]:
    parts = [part.strip() for part in line.split(";")]
    name, sep, value = parts[0].partition("=")
    name = name.strip()
    if not name or not sep:
        return None
    domain = ""
    path = ""
    secure = False
    expires: Optional[int] = None
    rest: dict[str, Optional[str]] = {}
    for attr in parts[1:]:
        key, _, val = attr.partition("=")
        key = key.strip().lower()
        val = val.strip()
        if key == "expires":
            parsed = http.cookiejar.http2time(val)
            if parsed is not None:
                expires = int(parsed)
        elif key == "max-age":
            try:
                expires = int(time.time()) + int(val)
            except ValueError:
                pass
        elif key == "domain":
            domain = val
        elif key == "path":
            path = val
        elif key == "secure":
            secure = True
        elif key == "httponly":
            rest["HttpOnly"] = None
    return http.cookiejar.Cookie(
        version=0,
        name=name,
        value=value.strip(),
        port=None,
        port_specified=False,
        domain=domain,
        domain_specified=bool(domain),
        domain_initial_dot=domain.startswith("."),
        path=path or "/",
        path_specified=bool(path),
        secure=secure,
        expires=expires,
        discard=expires is None,
        comment=None,
        comment_url=None,
        rest=rest,
    )


def _raw_form(cookie: http.cookiejar.Cookie) -> str:
    parts = [cookie.name if cookie.value is None else f"{cookie.name}={cookie.value}"]
    if cookie.secure:
        parts.append("secure")
    if cookie.has_nonstandard_attr("HttpOnly"):
        parts.append("HttpOnly")
    if cookie.expires is not None:
        parts.append("expires=" + _format_expires(cookie.expires))
    if cookie.domain_specified:
        parts.append("domain=" + cookie.domain)
    if cookie.path_specified:
        parts.append("path=" + cookie.path)
    return "; ".join(parts)


class CookieJar(http.cookiejar.CookieJar):
    """Cookie jar that can be saved to and restored from raw Set-Cookie lines."""

    def restore_cookie(self, raw: Union[str, bytes]) -> None:
        """Replace all cookies with those in *raw*, one cookie per line."""
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        self.clear()
        for line in raw.splitlines():
            cookie = _parse_cookie(line)
            if cookie is not None:
                self.set_cookie(cookie)

    def dump_cookie(self, domains: Optional[Iterable[str]] = None) -> str:
        """Return the cookies in raw form, one per line.

        With *domains*, only cookies whose domain occurs in one of them are kept.
        """
        wanted = list(domains or ())
        lines = []
        for cookie in self:
            if wanted and not any(cookie.domain in entry for entry in wanted):
                continue
            lines.append(_raw_form(cookie) + "\n")
        return "".join(lines)

    def all_cookies(self) -> list[http.cookiejar.Cookie]:
        return list(self)


@functools.lru_cache(maxsize=None)
def _shared_cookie_jar() -> CookieJar:
    return CookieJar()


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


class NetworkAccessManager:
    """Issues HTTP requests, adding default headers for the chat service hosts.

    Redirects are not followed; HTTP error statuses (including 3xx) are
    returned as the response rather than raised.
    """

    def __init__(self, cookie_jar: Optional[CookieJar] = None,
                 timeout: float = DEFAULT_TIMEOUT) -> None:
        self.cookie_jar = cookie_jar if cookie_jar is not None else _shared_cookie_jar()
        self.timeout = timeout
        self._headers = RequestHeaders()
        self._headers.set_paths(SPECIAL_PATHS)
        self._headers.add_header("User-Agent", DEFAULT_USER_AGENT)
        self._headers.add_header("Referer", DEFAULT_REFERER)
        self._opener = urllib.request.build_opener(
            _NoRedirect(), urllib.request.HTTPCookieProcessor(self.cookie_jar)
        )

    def set_request_headers(self, headers: HeaderSpec) -> None:
        """Replace the default headers with *headers*."""
        self._headers.clear_headers()
        for name, value in _header_items(headers):
            self._headers.add_header(name, value)

    def set_request_header(self, name: str, value: str) -> None:
        self._headers.add_header(name, value)

    def request_headers(self) -> dict[str, str]:
        return dict(self._headers.headers())

    def request_header(self, name: str) -> Optional[str]:
        return dict(self._headers.headers()).get(name)

    def prepare_headers(self, url: str, headers: HeaderSpec = None) -> dict[str, str]:
        """Return *headers* completed with the defaults that apply to *url*."""
        result = dict(_header_items(headers))
        self._headers.apply(url, result)
        return result

    def open(self, url: str, data: bytes = b"", method: str = "GET",
             headers: HeaderSpec = None):
        """Send a request and return the response object."""
        method = method.upper()
        body = data if method in ("POST", "PUT") else None
        request = urllib.request.Request(
            url, data=body, headers=self.prepare_headers(url, headers), method=method
        )
        try:
            return self._opener.open(request, timeout=self.timeout)
        except urllib.error.HTTPError as error:
            return error


# Kept for callers that want the timestamp-to-seconds helper used in tests.
_timegm = calendar.timegm