import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from together.netmanager import (
    DEFAULT_REFERER,
    DEFAULT_USER_AGENT,
    SPECIAL_PATHS,
    CookieJar,
    NetworkAccessManager,
    RequestHeaders,
)


class _EchoHandler(BaseHTTPRequestHandler):
    def _reply(self, payload):
        body = json.dumps(payload).encode()
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path.startswith("/redirect"):
            self.send_response(302)
            self.send_header("Location", "/wx")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return
        self._reply({k.lower(): v for k, v in self.headers.items()})

    def do_POST(self):
        length = int(self.headers.get("Content-Length", "0"))
        self._reply({"body": self.rfile.read(length).decode()})

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = HTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}"
    httpd.shutdown()
    httpd.server_close()


def test_add_header_replaces_in_place():
    h = RequestHeaders()
    h.add_header("A", "1")
    h.add_header("B", "2")
    h.add_header("A", "3")
    assert h.headers() == [("A", "3"), ("B", "2")]


def test_remove_and_has_header():
    h = RequestHeaders()
    h.add_header("A", "1")
    assert h.has_header("A")
    h.remove_header("A")
    assert not h.has_header("A")
    h.remove_header("missing")
    assert h.headers() == []


def test_clear_headers():
    h = RequestHeaders()
    h.add_header("A", "1")
    h.clear_headers()
    assert h.headers() == []


def test_add_path_deduplicates():
    h = RequestHeaders()
    h.add_path("wx")
    h.add_path("wx")
    h.add_path("qq")
    assert h.paths() == ["wx", "qq"]
    h.set_paths(["x"])
    assert h.paths() == ["x"]


def test_apply_only_on_matching_url():
    h = RequestHeaders()
    h.set_paths(["qq"])
    h.add_header("X-Test", "v")
    target = {}
    assert not h.apply("https://example.com/", target)
    assert target == {}
    assert not h.apply("", target)
    assert h.apply("https://wx.qq.com/x", target)
    assert target == {"X-Test": "v"}


def test_apply_keeps_existing_header_case_insensitive():
    h = RequestHeaders()
    h.set_paths(["qq"])
    h.add_header("Referer", "default")
    h.add_header("Accept", "all")
    target = {"referer": "mine"}
    assert h.apply("https://qq.com", target)
    assert target == {"referer": "mine", "Accept": "all"}


def test_manager_defaults():
    m = NetworkAccessManager(cookie_jar=CookieJar())
    assert m.request_header("Referer") == DEFAULT_REFERER
    assert m.request_header("User-Agent") == DEFAULT_USER_AGENT
    assert m.request_header("Nope") is None


def test_manager_set_request_headers_forms():
    m = NetworkAccessManager(cookie_jar=CookieJar())
    m.set_request_headers({"A": "1"})
    assert m.request_headers() == {"A": "1"}
    m.set_request_headers([{"name": "B", "value": "2"}, {"name": "C", "value": "3"}])
    assert m.request_headers() == {"B": "2", "C": "3"}
    m.set_request_header("B", "9")
    assert m.request_header("B") == "9"


@pytest.mark.parametrize("path", SPECIAL_PATHS)
def test_prepare_headers_for_special_paths(path):
    m = NetworkAccessManager(cookie_jar=CookieJar())
    prepared = m.prepare_headers(f"https://host/{path}/x", {"Extra": "e"})
    assert prepared["Referer"] == DEFAULT_REFERER
    assert prepared["Extra"] == "e"


def test_prepare_headers_other_host():
    m = NetworkAccessManager(cookie_jar=CookieJar())
    assert m.prepare_headers("https://example.com/", None) == {}


def test_cookie_round_trip():
    jar = CookieJar()
    jar.restore_cookie("sid=abc; domain=.example.com; path=/\nuid=42; secure; HttpOnly\n")
    cookies = {c.name: c for c in jar.all_cookies()}
    assert cookies["sid"].value == "abc"
    assert cookies["uid"].secure
    other = CookieJar()
    other.restore_cookie(jar.dump_cookie())
    assert sorted((c.name, c.value, c.domain) for c in other.all_cookies()) == sorted(
        (c.name, c.value, c.domain) for c in jar.all_cookies()
    )


def test_restore_replaces_existing():
    jar = CookieJar()
    jar.restore_cookie(b"a=1; domain=.example.com; path=/")
    jar.restore_cookie(b"b=2; domain=.example.com; path=/")
    assert [c.name for c in jar.all_cookies()] == ["b"]


def test_dump_cookie_filters_by_domain():
    jar = CookieJar()
    jar.restore_cookie("a=1; domain=.one.example.com; path=/\nb=2; domain=.two.example.com; path=/")
    dumped = jar.dump_cookie([".one.example.com"])
    assert dumped.startswith("a=1")
    assert "b=2" not in dumped
    assert dumped.count("\n") == 1


def test_open_applies_headers(server):
    m = NetworkAccessManager(cookie_jar=CookieJar())
    with m.open(server + "/wx") as response:
        seen = json.loads(response.read())
    assert seen["user-agent"] == DEFAULT_USER_AGENT
    assert seen["referer"] == DEFAULT_REFERER


def test_open_without_match_has_no_referer(server):
    m = NetworkAccessManager(cookie_jar=CookieJar())
    with m.open(server + "/plain") as response:
        seen = json.loads(response.read())
    assert "referer" not in seen


def test_open_does_not_follow_redirect(server):
    m = NetworkAccessManager(cookie_jar=CookieJar())
    response = m.open(server + "/redirect")
    try:
        assert response.getcode() == 302
        assert response.headers["Location"] == "/wx"
    finally:
        response.close()


def test_open_post_sends_body(server):
    m = NetworkAccessManager(cookie_jar=CookieJar())
    with m.open(server + "/post", b"a=1", "post") as response:
        seen = json.loads(response.read())
    assert seen["body"] == "a=1"