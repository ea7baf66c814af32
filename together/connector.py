"""Asynchronous and synchronous HTTP requests with reply post-processing."""

from __future__ import annotations

import base64
import enum
import os
import tempfile
import threading
import time
import urllib.parse
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from together.netmanager import NetworkAccessManager
from together.stdutil import UncompressError, file_put_contents, ungzip, unz

__all__ = [
    "ConnectType",
    "ConnectorError",
    "Reply",
    "UNKNOWN_NETWORK_ERROR",
    "error_string",
    "make_post_data",
    "decode_body",
    "NetworkConnector",
]

UNKNOWN_NETWORK_ERROR = 99
_MAX_REDIRECTS = 20

HeaderSpec = Union[Mapping[str, Any], Iterable[Mapping[str, Any]], None]


class ConnectType(enum.IntEnum):
    """HTTP method used for a request."""

    GET = 0
    POST = 1
    PUT = 2
    DELETE = 3

    @property
    def method(self) -> str:
        return self.name


class ConnectorError(enum.IntEnum):
    """Errors raised by the connector itself (network errors are positive)."""

    NOT_INITIALIZED = -1
    UNCOMPRESS_FAIL = -2
    REPLY_NOT_FOUND = -3
    REQUEST_FIELD_NOT_FOUND = -4
    DATA_WRITE_FAIL = -5


@dataclass
class Reply:
    """A finished HTTP reply.

    ``error`` is 0 on success and positive for a network or HTTP error.
    """

    body: bytes = b""
    status_code: int = 200
    content_encoding: str = ""
    location: str = ""
    error: int = 0
    error_text: str = ""


_ERROR_TEXT = {
    ConnectorError.NOT_INITIALIZED: "Network access manager is not initialized",
    ConnectorError.UNCOMPRESS_FAIL: "Uncompress reply data error",
    ConnectorError.REPLY_NOT_FOUND: "Reply is null",
    ConnectorError.REQUEST_FIELD_NOT_FOUND: "Missing request info",
    ConnectorError.DATA_WRITE_FAIL: "Data write fail",
}


def error_string(code: int) -> str:
    """Return a human readable description of an error code."""
    if code == 0:
        return "No error"
    if code > 0:
        return "Network reply error"
    try:
        return _ERROR_TEXT[ConnectorError(code)]
    except (ValueError, KeyError):
        return "Other connector error"


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if value is None:
        return b""
    if isinstance(value, bool):
        return b"true" if value else b"false"
    return str(value).encode("utf-8")


def make_post_data(mapping: Mapping[str, Any]) -> bytes:
    """Build a form body ``key=value&...`` with keys in sorted order.

    Values are percent-encoded; keys are written as given.
    """
    parts = [
        str(key).encode("utf-8") + b"=" + urllib.parse.quote_from_bytes(_to_bytes(mapping[key]), safe="").encode("ascii")
        for key in sorted(mapping)
    ]
    return b"&".join(parts)


def decode_body(data: bytes, content_encoding: Optional[str]) -> bytes:
    """Inflate *data* according to its ``Content-Encoding``.

    Raises :class:`UncompressError` when a compressed body is corrupt.
    """
    if content_encoding == "gzip":
        return ungzip(data)
    if content_encoding == "deflate":
        return unz(data)
    return data


def _decode_or_raw(data: bytes, content_encoding: Optional[str]) -> bytes:
    try:
        return decode_body(data, content_encoding)
    except UncompressError:
        return data


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _normalize_headers(headers: HeaderSpec) -> dict[str, str]:
    if headers is None:
        return {}
    if isinstance(headers, Mapping):
        return {str(k): _text(_to_bytes(v)) for k, v in headers.items()}
    result = {}
    for entry in headers:
        if isinstance(entry, Mapping):
            result[str(entry.get("name", ""))] = _text(_to_bytes(entry.get("value", "")))
    return result


def _with_queries(url: str, queries) -> str:
    if not queries:
        return url
    encoded = "&".join(
        f"{_text(_to_bytes(key))}={_text(_to_bytes(value))}" for key, value in queries
    )
    parts = urllib.parse.urlsplit(url)
    return urllib.parse.urlunsplit(parts._replace(query=encoded))


def _http_transport(manager: NetworkAccessManager) -> Callable[..., Reply]:
    def transport(url: str, data: bytes, connect_type: ConnectType,
                  headers: dict[str, str]) -> Reply:
        response = manager.open(url, data, ConnectType(connect_type).method, headers)
        with response:
            body = response.read()
            status = response.status if response.status is not None else response.getcode()
            reply_headers = response.headers
            error = status if status >= 400 else 0
            return Reply(
                body=body,
                status_code=status,
                content_encoding=reply_headers.get("Content-Encoding", "") or "",
                location=reply_headers.get("Location", "") or "",
                error=error,
                error_text=str(getattr(response, "reason", "")) if error else "",
            )

    return transport


def _start_thread(job: Callable[[], None]) -> None:
    threading.Thread(target=job, daemon=True).start()


Transport = Callable[[str, bytes, ConnectType, dict], Reply]
FinishedCallback = Callable[[str, int, str], None]


class NetworkConnector:
    """Issues requests and reports each result as ``(name, error, value)``.

    Asynchronous requests are identified by ``"<field>-<milliseconds>"``.
    A field starting with ``FILE`` stores the body in the cache directory and
    reports the file path; one starting with ``BASE64`` reports the body
    base64-encoded; otherwise the decoded body text is reported.
    """

    def __init__(self, manager: Optional[NetworkAccessManager] = None, *,
                 transport: Optional[Transport] = None,
                 cache_path: Optional[str] = None,
                 on_finished: Optional[FinishedCallback] = None,
                 submit: Optional[Callable[[Callable[[], None]], Any]] = None) -> None:
        if transport is None:
            transport = _http_transport(manager if manager is not None else NetworkAccessManager())
        self._transport = transport
        self.cache_path = cache_path if cache_path is not None else tempfile.gettempdir()
        self.on_finished = on_finished
        self._submit = submit if submit is not None else _start_thread
        self._pending: dict[str, str] = {}
        self._lock = threading.Lock()

    def _call(self, url: str, data: bytes, connect_type: int, headers: HeaderSpec) -> Reply:
        return self._transport(url, data, ConnectType(connect_type), _normalize_headers(headers))

    def request(self, url: str, field: str, data: bytes = b"",
                connect_type: int = ConnectType.GET, headers: HeaderSpec = None) -> str:
        """Start a request in the background and return its name."""
        name = f"{field}-{int(time.time() * 1000)}"
        with self._lock:
            self._pending[name] = url

        def job() -> None:
            try:
                reply = self._call(url, data, connect_type, headers)
            except OSError as exc:
                reply = Reply(status_code=0, error=UNKNOWN_NETWORK_ERROR, error_text=str(exc))
            self.finish(name, reply)

        self._submit(job)
        return name

    def finish(self, name: str, reply: Optional[Reply]) -> tuple[str, int, str]:
        """Process a finished reply for request *name* and report the result."""
        data = b""
        value = ""
        if reply is not None:
            err = reply.error
            if err == 0:
                data = reply.body
                try:
                    value = _text(decode_body(data, reply.content_encoding))
                except UncompressError:
                    err = ConnectorError.UNCOMPRESS_FAIL
            else:
                value = reply.error_text
        else:
            err = ConnectorError.REPLY_NOT_FOUND

        with self._lock:
            known = self._pending.pop(name, None) is not None
        if not known:
            err = ConnectorError.REQUEST_FIELD_NOT_FOUND

        if err < 0:
            value = error_string(err)
        elif err == 0:
            parts = name.split("-")
            if parts[0].startswith("FILE") and len(parts) > 1:
                path = os.path.join(self.cache_path, parts[1])
                try:
                    file_put_contents(path, data)
                    value = path
                except (OSError, ValueError):
                    err = ConnectorError.DATA_WRITE_FAIL
                    value = error_string(err)
            elif parts[0].startswith("BASE64"):
                value = base64.b64encode(data).decode("ascii")

        result = (name, int(err), value)
        if self.on_finished is not None:
            self.on_finished(*result)
        return result

    def pending(self) -> dict[str, str]:
        """Return the requests still running, as name to URL."""
        with self._lock:
            return dict(self._pending)

    def request_sync(self, url: str, data: bytes = b"",
                     connect_type: int = ConnectType.GET, headers: HeaderSpec = None) -> str:
        """Perform a request and return the body text, or ``""`` on failure.

        A body that cannot be inflated is returned as received.
        """
        try:
            reply = self._call(url, data, connect_type, headers)
        except OSError:
            return ""
        return _text(_decode_or_raw(reply.body, reply.content_encoding))

    def sync_request(self, url: str, queries=None, data: bytes = b"",
                     connect_type: int = ConnectType.GET, headers: HeaderSpec = None,
                     redirect: bool = True) -> tuple[int, bytes]:
        """Perform a request and return ``(error, body)``.

        *queries* replaces the URL's query with ``key=value`` pairs, already
        encoded. On a 301/302 the target is followed when *redirect* is true;
        otherwise the target URL is returned as the body. ``(-1, b"")`` is
        returned when the request cannot be made.
        """
        current = _with_queries(url, queries)
        try:
            for _ in range(_MAX_REDIRECTS + 1):
                reply = self._call(current, data, connect_type, headers)
                if reply.status_code in (301, 302) and reply.location:
                    target = urllib.parse.urljoin(current, reply.location)
                    if not redirect:
                        return reply.error, target.encode("utf-8")
                    current = target
                    continue
                return reply.error, _decode_or_raw(reply.body, reply.content_encoding)
        except OSError:
            return -1, b""
        return -1, b""