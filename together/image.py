"""An image item that loads from local files, data URLs or the network."""

from __future__ import annotations

import base64
import binascii
import enum
import io
import os
import re
import urllib.parse
from collections.abc import MutableMapping
from typing import Any, Callable, Optional

from PIL import Image

from together.stdutil import UncompressError, file_put_contents, fixed_float, ungzip, unz

__all__ = ["ImageStatus", "FillMode", "ImageItem"]

_DATA_URL = re.compile(r"^data:img/(.+);base64,(.+)$", re.DOTALL)

Requester = Callable[[str], Any]
ChangeListener = Callable[[str, Any], None]


class ImageStatus(enum.IntEnum):
    """Loading state of an image."""

    NULL = 0
    READY = 1
    LOADING = 2
    ERROR = 3


class FillMode(enum.IntEnum):
    """How the image is fitted into the item."""

    STRETCH = 0
    PRESERVE_ASPECT_FIT = 1
    PRESERVE_ASPECT_CROP = 2
    TILE = 3
    TILE_VERTICALLY = 4
    TILE_HORIZONTALLY = 5


class ImageItem:
    """Loads image data for a source URL and tracks its status and progress.

    Local paths and ``file:`` URLs are read directly, ``data:img/...;base64,``
    URLs are decoded in place, and anything else is fetched through
    *requester*, which is called with the URL and must later hand the reply to
    :meth:`finish`. With caching enabled, remote data is stored in
    *cache_store* under its source URL and reused on the next load.
    Listeners receive ``(property_name, new_value)`` on every change.
    """

    def __init__(self, requester: Optional[Requester] = None,
                 cache_store: Optional[MutableMapping[str, bytes]] = None, *,
                 cache: bool = False, asynchronous: bool = True,
                 fill_mode: FillMode = FillMode.STRETCH,
                 mirror: bool = False, smooth: bool = True) -> None:
        self.requester = requester
        self.cache_store: MutableMapping[str, bytes] = cache_store if cache_store is not None else {}
        self.listeners: list[ChangeListener] = []
        self.image: Optional[Image.Image] = None
        self._source = ""
        self._status = ImageStatus.NULL
        self._progress = 0.0
        self._painted_width = 0.0
        self._painted_height = 0.0
        self._source_size: Optional[tuple[int, int]] = None
        self._cache = cache
        self._asynchronous = asynchronous
        self._fill_mode = FillMode(fill_mode)
        self._mirror = mirror
        self._smooth = smooth
        self._data = b""
        self._encoding = ""
        self._awaiting = False

    # -- notification helpers -------------------------------------------------

    def _notify(self, name: str, value: Any) -> None:
        for listener in list(self.listeners):
            listener(name, value)

    def _set(self, name: str, value: Any) -> None:
        if getattr(self, "_" + name) != value:
            setattr(self, "_" + name, value)
            self._notify(name, value)

    # -- properties -----------------------------------------------------------

    @property
    def source(self) -> str:
        return self._source

    @source.setter
    def source(self, value: str) -> None:
        self.set_source(value)

    @property
    def status(self) -> ImageStatus:
        return self._status

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def painted_width(self) -> float:
        return self._painted_width

    @property
    def painted_height(self) -> float:
        return self._painted_height

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def source_size(self) -> Optional[tuple[int, int]]:
        return self._source_size

    @source_size.setter
    def source_size(self, value: Optional[tuple[int, int]]) -> None:
        self._set("source_size", value)

    @property
    def smooth(self) -> bool:
        return self._smooth

    @smooth.setter
    def smooth(self, value: bool) -> None:
        self._set("smooth", bool(value))

    @property
    def mirror(self) -> bool:
        return self._mirror

    @mirror.setter
    def mirror(self, value: bool) -> None:
        self._set("mirror", bool(value))

    @property
    def cache(self) -> bool:
        return self._cache

    @cache.setter
    def cache(self, value: bool) -> None:
        self._set("cache", bool(value))

    @property
    def asynchronous(self) -> bool:
        return self._asynchronous

    @asynchronous.setter
    def asynchronous(self, value: bool) -> None:
        self._set("asynchronous", bool(value))

    @property
    def fill_mode(self) -> FillMode:
        return self._fill_mode

    @fill_mode.setter
    def fill_mode(self, value: FillMode) -> None:
        self._set("fill_mode", FillMode(value))

    # -- loading --------------------------------------------------------------

    def set_source(self, source: str) -> None:
        """Change the source and start loading it."""
        if source == self._source:
            return
        self._source = source
        self._start_load()
        self._notify("source", source)

    def set_progress(self, value: float) -> None:
        """Set the load progress; changes below 1/100 of a step still count."""
        if self._progress != fixed_float(value, 2):
            self._progress = value
            self._notify("progress", value)

    def _set_status(self, status: ImageStatus) -> None:
        self._set("status", status)

    def _reset(self) -> None:
        self._set_status(ImageStatus.NULL)
        self._set("source_size", None)
        self.set_progress(0.0)
        self._set("painted_width", 0.0)
        self._set("painted_height", 0.0)
        self._data = b""
        self._encoding = ""
        self.image = None

    def _start_load(self) -> None:
        self._reset()
        self._awaiting = False
        scheme = urllib.parse.urlsplit(self._source).scheme
        if scheme in ("", "file"):
            self._load_local(self._local_path())
        elif scheme == "data":
            self._load_base64(self._source)
        elif self._cache and self._source in self.cache_store:
            self._load_bytes(self.cache_store[self._source])
        else:
            self._load_network(self._source)

    def _local_path(self) -> str:
        parts = urllib.parse.urlsplit(self._source)
        if parts.scheme == "file":
            return urllib.parse.unquote(parts.path)
        return self._source

    def _load_bytes(self, data: bytes) -> None:
        self._set_status(ImageStatus.LOADING)
        self.set_progress(0.0)
        self._data = bytes(data)
        self._encoding = ""
        self.set_progress(1.0)
        self._load_image_data(remote=False)

    def _load_local(self, path: str) -> None:
        self._set_status(ImageStatus.LOADING)
        if not path or not os.path.isfile(path):
            self._set_status(ImageStatus.ERROR)
            return
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError:
            self._set_status(ImageStatus.ERROR)
            return
        self._load_bytes(data)

    def _load_base64(self, url: str) -> None:
        self._set_status(ImageStatus.LOADING)
        match = _DATA_URL.match(url)
        if match is None:
            self._set_status(ImageStatus.ERROR)
            return
        try:
            data = base64.b64decode(match.group(2))
        except (binascii.Error, ValueError):
            self._set_status(ImageStatus.ERROR)
            return
        self._load_bytes(data)

    def _load_network(self, url: str) -> None:
        self._set_status(ImageStatus.LOADING)
        if self.requester is None:
            self._set_status(ImageStatus.ERROR)
            return
        self._data = b""
        self._awaiting = True
        self.requester(url)

    def download_progress(self, read: int, total: int) -> None:
        """Report bytes received for the pending network request."""
        if not self._awaiting:
            return
        if read == 0 and total == 0:
            return
        self.set_progress(read / total if total > 0 else 0.0)

    def finish(self, data: bytes = b"", content_encoding: str = "",
               status_code: int = 200, location: str = "") -> None:
        """Hand over the finished reply of the pending network request.

        A 301/302 reply is followed to *location*; a status of 400 or more
        marks the image as failed. Replies with nothing pending are ignored.
        """
        if not self._awaiting:
            return
        self._awaiting = False
        if status_code >= 400:
            self._set_status(ImageStatus.ERROR)
            return
        if status_code in (301, 302):
            self.set_progress(0.0)
            self._data = b""
            target = urllib.parse.urljoin(self._source, location) if location else self._source
            self._load_network(target)
            return
        self.set_progress(1.0)
        self._data = bytes(data)
        self._encoding = content_encoding if content_encoding in ("gzip", "deflate") else ""
        self._load_image_data(remote=True)

    def _load_image_data(self, remote: bool) -> None:
        if self._encoding:
            inflate = ungzip if self._encoding == "gzip" else unz
            try:
                self._data = inflate(self._data)
            except UncompressError:
                pass
        try:
            image = Image.open(io.BytesIO(self._data))
            image.load()
        except (OSError, ValueError, Image.DecompressionBombError):
            self._set_status(ImageStatus.ERROR)
            return
        self.image = image
        if self._cache and remote:
            self.cache_store[self._source] = self._data
        self._set_status(ImageStatus.READY)

    def dump(self, path: str) -> bool:
        """Write the loaded image data to *path*; return whether it was written."""
        if self._status != ImageStatus.READY:
            return False
        file_put_contents(path, self._data)
        return True