import base64
import gzip
import os
import time
import zlib

import pytest

from together import stdutil
from together.stdutil import (
    UncompressError,
    adjust_path,
    cale_dir_size,
    file_get_contents,
    file_put_contents,
    fixed_float,
    generate_file_name,
    get_mime_type,
    get_time_zone,
    md5,
    md5_b64,
    mkdirs,
    remove_all_file,
    uncompress,
    ungzip,
    unz,
    xml_to_variant,
)


PAYLOAD = b"hello world, hello world, hello world " * 20


def test_md5_empty_string():
    assert md5("") == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_b64_matches_hex_digest():
    for text in ["", "abc", "together"]:
        assert base64.b64decode(md5_b64(text)) == bytes.fromhex(md5(text))


def test_md5_differs_for_different_input():
    assert md5("a") != md5("b")
    assert len(md5("a")) == 32


def test_ungzip_round_trip():
    assert ungzip(gzip.compress(PAYLOAD)) == PAYLOAD


def test_ungzip_accepts_zlib_wrapper():
    assert ungzip(zlib.compress(PAYLOAD)) == PAYLOAD


def test_unz_raw_deflate_round_trip():
    comp = zlib.compressobj(9, zlib.DEFLATED, -15)
    data = comp.compress(PAYLOAD) + comp.flush()
    assert unz(data) == PAYLOAD


def test_uncompress_with_explicit_window_bits():
    assert uncompress(zlib.compress(PAYLOAD), 15) == PAYLOAD


def test_uncompress_too_short_raises():
    with pytest.raises(UncompressError):
        ungzip(b"abcd")


def test_uncompress_garbage_raises():
    with pytest.raises(UncompressError):
        ungzip(b"this is not compressed at all")


def test_xml_single_text_child():
    result = xml_to_variant("<a x='1' y='2'>hi</a>")
    assert result == {"tag": "a", "params": {"x": "1", "y": "2"}, "children": "hi"}


def test_xml_empty_element():
    assert xml_to_variant("<root/>") == {"tag": "root", "params": {}, "children": None}


def test_xml_nested_children():
    result = xml_to_variant("<r><b k='v'>t</b><c/></r>")
    assert result["tag"] == "r"
    assert result["children"] == [
        {"tag": "b", "params": {"k": "v"}, "children": "t"},
        {"tag": "c", "params": {}, "children": None},
    ]


def test_xml_single_element_child_is_list():
    result = xml_to_variant("<r><b/></r>")
    assert result["children"] == [{"tag": "b", "params": {}, "children": None}]


def test_xml_parse_error():
    with pytest.raises(ValueError):
        xml_to_variant("<a><b></a>")


def test_file_put_and_get_round_trip(tmp_path):
    target = tmp_path / "f.bin"
    assert file_put_contents(target, b"abc") == 3
    file_put_contents(target, b"def", append=True)
    assert file_get_contents(target) == b"abcdef"
    file_put_contents(target, b"xyz")
    assert file_get_contents(target) == b"xyz"


def test_file_put_contents_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        file_put_contents(tmp_path / "x", b"")
    with pytest.raises(ValueError):
        file_put_contents("", b"data")


def test_file_get_contents_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_get_contents(tmp_path / "missing")


def test_mkdirs_creates_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    mkdirs(target)
    mkdirs(target)
    assert target.is_dir()


def test_adjust_path_existing_and_missing(tmp_path):
    base = tmp_path / "bin"
    base.mkdir()
    (tmp_path / "misc").mkdir()
    (tmp_path / "misc" / "f.txt").write_text("x")
    adjusted = adjust_path("misc/f.txt", base)
    assert os.path.samefile(adjusted, tmp_path / "misc" / "f.txt")
    assert adjust_path("misc/none.txt", base) == "misc/none.txt"


def test_generate_file_name_unique(tmp_path):
    first = generate_file_name("a.tar.gz", tmp_path)
    assert first == os.path.abspath(f"{tmp_path}/a.tar.gz")
    open(first, "w").close()
    second = generate_file_name("a.tar.gz", tmp_path)
    assert second == os.path.abspath(f"{tmp_path}/a_0.tar.gz")
    open(second, "w").close()
    third = generate_file_name("a.tar.gz", tmp_path)
    assert third == os.path.abspath(f"{tmp_path}/a_1.tar.gz")
    assert not os.path.exists(third)


def test_remove_all_file_keeps_directory(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b")
    remove_all_file(tmp_path)
    assert tmp_path.is_dir()
    assert list(tmp_path.iterdir()) == []


def test_remove_all_file_single_file(tmp_path):
    target = tmp_path / "f"
    target.write_text("x")
    remove_all_file(target)
    assert not target.exists()


def test_cale_dir_size(tmp_path):
    (tmp_path / "a").write_bytes(b"12345")
    (tmp_path / "b").write_bytes(b"123")
    assert cale_dir_size(tmp_path / "a") == 5
    assert cale_dir_size(tmp_path) == 8
    assert cale_dir_size(tmp_path / "missing") == 0
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c").write_bytes(b"12")
    assert cale_dir_size(tmp_path) >= 10


def test_fixed_float_truncates():
    assert fixed_float(3.14159, 2) == 3.14
    assert fixed_float(2.99) == pytest.approx(2.9)
    assert fixed_float(-1.99, 1) == pytest.approx(-1.9)


def test_get_time_zone_range():
    zone = get_time_zone()
    assert -12 <= zone <= 12


def test_get_time_zone_wraps_late_hours(monkeypatch):
    fake = time.struct_time((1970, 1, 1, 20, 0, 0, 3, 1, 0))
    monkeypatch.setattr(stdutil.time, "localtime", lambda t=None: fake)
    assert get_time_zone() == -4


def test_get_mime_type(tmp_path):
    mime = tmp_path / "mime.types"
    mime.write_text(
        "# comment line\n"
        "\n"
        "text/html\thtml htm\n"
        "image/png  png\n"
        "application/x-empty\n"
    )
    assert get_mime_type("HTM", mime) == "text/html"
    assert get_mime_type("png", mime) == "image/png"
    assert get_mime_type("zip", mime) is None
    assert get_mime_type("png", tmp_path / "absent.types") is None