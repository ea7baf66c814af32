"""General helpers: hashing, decompression, XML conversion and file utilities."""

from __future__ import annotations

import base64
import hashlib
import os
import re
import sys
import time
import zlib
from pathlib import Path
from typing import Any, Optional, Union
from xml.etree import ElementTree

__all__ = [
    "UncompressError",
    "md5",
    "md5_b64",
    "uncompress",
    "ungzip",
    "unz",
    "xml_to_variant",
    "file_put_contents",
    "file_get_contents",
    "mkdirs",
    "adjust_path",
    "generate_file_name",
    "remove_all_file",
    "cale_dir_size",
    "fixed_float",
    "get_time_zone",
    "get_mime_type",
]

PathLike = Union[str, "os.PathLike[str]"]

GZIP_WINDOW_BITS = 32 + 15
RAW_DEFLATE_WINDOW_BITS = -15
_CHUNK_SIZE = 1024
_WHITESPACE = re.compile(r"\s+")


class UncompressError(ValueError):
    """Raised when compressed data cannot be inflated."""


def _digest(text: str) -> bytes:
    return hashlib.md5(text.encode("utf-8")).digest()


def md5(text: str) -> str:
    """Return the lower-case hex MD5 digest of *text*."""
    return _digest(text).hex()


def md5_b64(text: str) -> str:
    """Return the base64-encoded MD5 digest of *text*."""
    return base64.b64encode(_digest(text)).decode("ascii")


def uncompress(data: bytes, window_bits: int) -> bytes:
    """Inflate *data* using zlib with the given window bits.

    Truncated streams yield whatever could be inflated; corrupt data raises
    :class:`UncompressError`.
    """
    if len(data) <= 4:
        raise UncompressError("input data is truncated")
    try:
        inflater = zlib.decompressobj(window_bits)
    except (ValueError, zlib.error) as exc:
        raise UncompressError(f"cannot initialise inflater: {exc}") from exc
    try:
        out = bytearray(inflater.decompress(data, 0))
        out += inflater.flush(_CHUNK_SIZE)
    except zlib.error as exc:
        raise UncompressError(str(exc)) from exc
    return bytes(out)


def ungzip(data: bytes) -> bytes:
    """Inflate gzip or zlib wrapped data (format detected automatically)."""
    return uncompress(data, GZIP_WINDOW_BITS)


def unz(data: bytes) -> bytes:
    """Inflate a raw deflate stream."""
    return uncompress(data, RAW_DEFLATE_WINDOW_BITS)


def _element_to_dict(element: ElementTree.Element) -> dict[str, Any]:
    children: list[Any] = []

    def add_text(text: Optional[str]) -> None:
        if text and text.strip():
            children.append(text)

    add_text(element.text)
    for child in element:
        children.append(_element_to_dict(child))
        add_text(child.tail)

    if not children:
        content: Any = None
    elif len(children) == 1 and isinstance(children[0], str):
        content = children[0]
    else:
        content = children

    return {
        "tag": element.tag,
        "params": dict(element.attrib),
        "children": content,
    }


def xml_to_variant(xml: str) -> dict[str, Any]:
    """Convert an XML document into nested dicts.

    Each element becomes ``{"tag", "params", "children"}``; ``children`` is
    ``None`` when empty, a string when the only child is text, else a list.
    Raises ``ValueError`` when the document cannot be parsed.
    """
    try:
        root = ElementTree.fromstring(xml)
    except ElementTree.ParseError as exc:
        line, column = exc.position
        raise ValueError(f"parse XML error: {exc} [line: {line}, column: {column}]") from exc
    return _element_to_dict(root)


def file_put_contents(path: PathLike, data: bytes, append: bool = False) -> int:
    """Write *data* to *path*, appending when asked; return bytes written."""
    if not os.fspath(path):
        raise ValueError("file path is empty")
    if not data:
        raise ValueError("data is empty")
    with open(path, "ab" if append else "wb") as handle:
        return handle.write(data)


def file_get_contents(path: PathLike) -> bytes:
    """Return the whole content of the file at *path*."""
    if not os.fspath(path):
        raise ValueError("file path is empty")
    with open(path, "rb") as handle:
        return handle.read()


def mkdirs(path: PathLike) -> None:
    """Create *path* and any missing parents."""
    os.makedirs(path, exist_ok=True)


def adjust_path(path: str, base_dir: Optional[PathLike] = None) -> str:
    """Resolve *path* against the installation directory.

    Returns ``<base_dir>/../<path>`` when it exists, else *path* unchanged.
    *base_dir* defaults to the directory of the running program.
    """
    if base_dir is None:
        base_dir = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
    candidate = f"{os.fspath(base_dir)}/../{path}"
    if os.path.exists(candidate):
        return candidate
    return path


def generate_file_name(file_name: str, path: PathLike = "./") -> str:
    """Return an absolute, not yet existing file path for *file_name* in *path*.

    Clashes are resolved as ``base_0.ext``, ``base_1.ext`` and so on.
    """
    directory = os.fspath(path)
    name = os.path.basename(file_name)
    base, dot, ext = name.partition(".")
    suffix = dot + ext if ext else ""
    candidate = f"{directory}/{file_name}"
    index = 0
    while os.path.exists(candidate):
        candidate = f"{directory}/{base}_{index}{suffix}"
        index += 1
    return os.path.abspath(candidate)


def _visible_entries(directory: Path):
    return (entry for entry in directory.iterdir() if not entry.name.startswith("."))


def _remove_tree(directory: Path, remove_self: bool) -> None:
    for entry in _visible_entries(directory):
        if entry.is_file():
            try:
                entry.unlink()
            except OSError:
                pass
        elif entry.is_dir():
            _remove_tree(entry, True)
    if remove_self:
        try:
            directory.rmdir()
        except OSError:
            pass


def remove_all_file(path: PathLike) -> None:
    """Delete a file, or everything inside a directory (keeping the directory)."""
    target = Path(path)
    if not target.exists():
        return
    if target.is_file():
        target.unlink()
    elif target.is_dir():
        _remove_tree(target.resolve(), False)


def _tree_size(directory: Path, count_self: bool) -> int:
    total = 0
    for entry in _visible_entries(directory):
        if entry.is_file():
            total += entry.stat().st_size
        elif entry.is_dir():
            total += _tree_size(entry, True)
    if count_self:
        total += directory.stat().st_size
    return total


def cale_dir_size(path: PathLike) -> int:
    """Return the size of a file, or the summed size of a directory's contents."""
    target = Path(path)
    if not target.exists():
        return 0
    if target.is_file():
        return target.stat().st_size
    if target.is_dir():
        return _tree_size(target.resolve(), False)
    return 0


def fixed_float(value: float, digits: int = 1) -> float:
    """Truncate *value* towards zero to *digits* decimal places."""
    scale = 10.0 ** digits
    return int(value * scale) / scale


def get_time_zone() -> int:
    """Return the local UTC offset in whole hours, in the range -11..12."""
    hour = time.localtime(0).tm_hour
    return hour - 24 if hour > 12 else hour


def get_mime_type(ext: str, mime_file: Optional[PathLike] = None) -> Optional[str]:
    """Look up the MIME type for extension *ext* in a ``mime.types`` file.

    Returns ``None`` when the file is missing or the extension is unknown.
    """
    if mime_file is None:
        mime_file = adjust_path("misc/mime.types")
    wanted = ext.lower()
    try:
        handle = open(mime_file, encoding="utf-8", errors="replace")
    except OSError:
        return None
    with handle:
        for raw in handle:
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            mime, *extensions = _WHITESPACE.split(line)
            if wanted in extensions:
                return mime
    return None