from urllib.parse import parse_qs, urlsplit

import pytest

from together.pipeline import REQUIRED_LOGIN_KEYS, LoginSession


def _full_login():
    return {key: f"v-{key}" for key in REQUIRED_LOGIN_KEYS}


def test_empty_session_has_no_login_data():
    assert LoginSession().get_login_data() is None


def test_login_data_round_trip():
    s = LoginSession()
    data = {"user_info": {"UserName": "me"}, "login_info": {"skey": "k"}}
    s.set_login_data(data)
    assert s.get_login_data() == data


def test_missing_part_is_cleared():
    s = LoginSession()
    s.set_login_data({"user_info": {"a": 1}, "login_info": {"b": 2}})
    s.set_login_data({"login_info": {"b": 3}})
    assert s.user_info == {}
    assert s.get_login_data() == {"user_info": {}, "login_info": {"b": 3}}


@pytest.mark.parametrize("bad", [None, "text", [1, 2]])
def test_non_mapping_is_ignored(bad):
    s = LoginSession()
    s.set_login_data({"login_info": {"b": 2}})
    s.set_login_data(bad)
    assert s.login_info == {"b": 2}


def test_is_valid_requires_all_keys():
    s = LoginSession()
    assert not s.is_valid()
    s.set_login_data({"login_info": _full_login()})
    assert s.is_valid()


@pytest.mark.parametrize("key", REQUIRED_LOGIN_KEYS)
def test_is_valid_rejects_empty_value(key):
    info = _full_login()
    info[key] = ""
    s = LoginSession()
    s.set_login_data({"login_info": info})
    assert not s.is_valid()


def test_sync_key_from_string_and_number():
    s = LoginSession()
    s.set_sync_key("abc")
    assert s.sync_key == "abc"
    s.set_sync_key(7)
    assert s.sync_key == "7"


def test_sync_key_from_list():
    s = LoginSession()
    s.set_sync_key({"List": [{"Key": 1, "Val": 100}, {"Key": 2, "Val": 200}]})
    assert s.sync_key == "1_100|2_200"


def test_sync_key_from_other_is_empty():
    s = LoginSession()
    s.set_sync_key("x")
    s.set_sync_key(None)
    assert s.sync_key == ""


def test_sync_check_url():
    s = LoginSession()
    info = _full_login()
    info["deviceId"] = "e000"
    s.set_login_data({"login_info": info})
    s.set_sync_key("1_100")
    url = s.sync_check_url(1234)
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
        "https://webpush.wx.qq.com/cgi-bin/mmwebwx-bin/synccheck"
    )
    query = {k: v[0] for k, v in parse_qs(parts.query).items()}
    assert query["skey"] == info["skey"]
    assert query["sid"] == info["wxsid"]
    assert query["uin"] == info["wxuin"]
    assert query["deviceid"] == "e000"
    assert query["synckey"] == "1_100"
    assert query["r"] == query["_"] == "1234"


def test_sync_check_url_default_timestamp_is_current():
    s = LoginSession()
    query = parse_qs(urlsplit(s.sync_check_url()).query)
    assert query["r"] == query["_"]
    assert int(query["r"][0]) > 1_000_000_000_000