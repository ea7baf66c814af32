import base64
import gzip
import io
import zlib

import pytest
from PIL import Image

from together.image import FillMode, ImageItem, ImageStatus


def _png(size=(3, 2)):
    buffer = io.BytesIO()
    Image.new("RGB", size, "red").save(buffer, format="PNG")
    return buffer.getvalue()


def _item(**kwargs):
    requests = []
    item = ImageItem(requester=requests.append, **kwargs)
    return item, requests


def test_data_url_loads():
    png = _png((5, 4))
    item, requests = _item()
    item.set_source("data:img/png;base64," + base64.b64encode(png).decode("ascii"))
    assert item.status == ImageStatus.READY
    assert item.image.size == (5, 4)
    assert item.data == png
    assert requests == []


def test_bad_data_url_is_error():
    item, _ = _item()
    item.set_source("data:text/plain;base64,aGVsbG8=")
    assert item.status == ImageStatus.ERROR


def test_local_file_and_file_url(tmp_path):
    png = _png()
    path = tmp_path / "pic.png"
    path.write_bytes(png)
    item, _ = _item()
    item.set_source(str(path))
    assert item.status == ImageStatus.READY
    other, _ = _item()
    other.set_source(path.as_uri())
    assert other.status == ImageStatus.READY
    assert other.data == png


def test_missing_file_is_error(tmp_path):
    item, _ = _item()
    item.set_source(str(tmp_path / "absent.png"))
    assert item.status == ImageStatus.ERROR


def test_network_load():
    png = _png()
    item, requests = _item()
    url = "http://example.com/a.png"
    item.set_source(url)
    assert item.status == ImageStatus.LOADING
    assert requests == [url]
    item.finish(png)
    assert item.status == ImageStatus.READY
    assert item.progress == 1.0


def test_gzip_reply_is_inflated(tmp_path):
    png = _png()
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    item.finish(gzip.compress(png), "gzip")
    assert item.status == ImageStatus.READY
    out = tmp_path / "out.png"
    assert item.dump(str(out)) is True
    assert out.read_bytes() == png


def test_deflate_reply_is_inflated():
    png = _png()
    compressor = zlib.compressobj(wbits=-15)
    raw = compressor.compress(png) + compressor.flush()
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    item.finish(raw, "deflate")
    assert item.status == ImageStatus.READY
    assert item.data == png


def test_redirect_is_followed():
    item, requests = _item()
    item.set_source("http://example.com/a.png")
    item.finish(b"", status_code=302, location="/b.png")
    assert requests[-1] == "http://example.com/b.png"
    assert item.status == ImageStatus.LOADING
    item.finish(_png())
    assert item.status == ImageStatus.READY


def test_http_error_status():
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    item.finish(b"not found", status_code=404)
    assert item.status == ImageStatus.ERROR


def test_invalid_image_bytes():
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    item.finish(b"definitely not an image")
    assert item.status == ImageStatus.ERROR


def test_no_requester_is_error():
    item = ImageItem()
    item.set_source("http://example.com/a.png")
    assert item.status == ImageStatus.ERROR


def test_cache_store_round_trip():
    png = _png()
    store = {}
    url = "http://example.com/a.png"
    item, _ = _item(cache_store=store, cache=True)
    item.set_source(url)
    item.finish(png)
    assert store[url] == png
    again, requests = _item(cache_store=store, cache=True)
    again.set_source(url)
    assert requests == []
    assert again.status == ImageStatus.READY


def test_download_progress():
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    item.download_progress(50, 200)
    assert item.progress == pytest.approx(0.25)
    item.download_progress(0, 0)
    assert item.progress == pytest.approx(0.25)
    item.download_progress(10, -1)
    assert item.progress == 0.0


def test_progress_notifies_listeners():
    item, _ = _item()
    seen = []
    item.listeners.append(lambda name, value: seen.append((name, value)))
    item.set_progress(0.5)
    assert ("progress", 0.5) in seen
    assert item.progress == 0.5


def test_dump_when_not_ready(tmp_path):
    item, _ = _item()
    item.set_source("http://example.com/a.png")
    out = tmp_path / "none.png"
    assert item.dump(str(out)) is False
    assert not out.exists()


def test_fill_mode_change_notifies_once():
    item, _ = _item()
    seen = []
    item.listeners.append(lambda name, value: seen.append((name, value)))
    item.fill_mode = 3
    item.fill_mode = FillMode.TILE
    assert item.fill_mode is FillMode.TILE
    assert seen == [("fill_mode", FillMode.TILE)]


def test_same_source_not_reloaded():
    item, requests = _item()
    url = "http://example.com/a.png"
    item.set_source(url)
    item.set_source(url)
    assert requests == [url]


def test_finish_without_pending_request_ignored():
    png = _png()
    item, _ = _item()
    item.set_source("data:img/png;base64," + base64.b64encode(png).decode("ascii"))
    item.finish(b"garbage", status_code=500)
    assert item.status == ImageStatus.READY