# together

Building blocks for a small chat client that talks to a web API. The package
holds the parts that do not depend on a user interface.

## Modules

- `together.pinyin`: `get_alphabet(text)` upper-cases ASCII letters and keeps
  digits. It replaces each CJK ideograph (from U+4E00 on) with the first
  letter of its Mandarin reading and leaves every other character unchanged.
  Use it to sort or group contact names.
- `together.stdutil`: data and file helpers.
  - `md5` and `md5_b64` hash text.
  - `uncompress`, `ungzip` (gzip or zlib, detected automatically) and `unz`
    (raw deflate) inflate data. They raise `UncompressError` on input of
    4 bytes or fewer and on corrupt data.
  - `xml_to_variant` turns an XML document into nested
    `{"tag", "params", "children"}` dicts and raises `ValueError` on bad XML.
  - `file_put_contents` and `file_get_contents` write and read whole files.
  - `generate_file_name` picks a free name of the form `base_0.ext`,
    `base_1.ext` and so on.
  - `remove_all_file` and `cale_dir_size` delete the contents of a file or
    directory and report its size.
  - `mkdirs`, `adjust_path`, `fixed_float` (truncates to a number of decimal
    places), `get_time_zone` and `get_mime_type`. `get_mime_type` looks an
    extension up in a `mime.types` file and returns `None` when the file or
    the extension is missing.
- `together.netmanager`:
  - `RequestHeaders` fills default headers into requests whose URL contains
    one of its paths.
  - `NetworkAccessManager` sends requests through `urllib`. It adds a
    browser `User-Agent` and a `Referer` to URLs that contain `wx`, `qq`,
    `wexin` or `wechat`. It does not follow redirects, and it returns HTTP
    error statuses as the response instead of raising them.
  - `CookieJar` saves and restores its cookies as raw Set-Cookie lines
    (`dump_cookie`, `restore_cookie`).
- `together.connector`:
  - `NetworkConnector.request` runs a request on a background thread and
    reports `(name, error, value)` to `on_finished`. A field that starts with
    `FILE` stores the body in `cache_path`. A field that starts with `BASE64`
    reports the body base64-encoded.
  - `request_sync` and `sync_request` block until the reply arrives.
    `sync_request` can follow 301/302 redirects.
  - The module also has `make_post_data` (form body with keys in sorted
    order), `decode_body`, `error_string`, `ConnectType`, `ConnectorError`
    and `Reply`.
- `together.pipeline`: `LoginSession` holds the login and user information
  and the sync key. `is_valid` checks that every required login key is
  present, and `sync_check_url` builds the sync-check URL.
- `together.listmodel`: `ListModel` is a list of dict rows. It calls count
  and data listeners when the rows change.
- `together.image`: `ImageItem` loads images with Pillow from local paths,
  `file:` URLs, `data:img/...;base64,` URLs, or network replies handed to
  `finish`. It tracks `status` (`ImageStatus`) and `progress`, and can keep
  remote data in a cache mapping.
- `together.metadata`: `MediaMetaData` reads media metadata by
  `MetaDataKey`, from a mapping or a callable.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from together.pinyin import get_alphabet
from together.stdutil import md5
from together.listmodel import ListModel

print(get_alphabet("abc1"))       # "ABC1"
print(md5("hello"))

model = ListModel()
model.append({"name": "alice", "id": 1})
model.set_value(0, "name", "bob")
print(model.get(0))               # {'name': 'bob', 'id': 1}
```

```python
from together.pipeline import LoginSession

session = LoginSession()
session.set_login_data({"login_info": {"skey": "token", "wxsid": "token"}})
print(session.is_valid())         # False until every required key is present
```

## What this package does not do

- It has no command to run and no chat screen. It is a library only.
- It does not play audio or video. `MediaMetaData` only looks up metadata
  values that you supply.
- `LoginSession` builds the sync-check URL but does not poll it in the
  background. There are no desktop notifications.
- Cookies are not written to disk automatically. Use `CookieJar.dump_cookie`
  and `CookieJar.restore_cookie` to save and load them yourself.