import pytest

from together.metadata import MediaMetaData, MetaDataKey


def test_mapping_reader_value():
    meta = MediaMetaData({MetaDataKey.TITLE: "Song", MetaDataKey.YEAR: 1999})
    assert meta.value(MetaDataKey.TITLE) == "Song"
    assert meta.value("year") == 1999
    assert meta.value(MetaDataKey.GENRE) is None


def test_callable_reader_receives_key():
    asked = []

    def reader(key):
        asked.append(key)
        return key.value

    meta = MediaMetaData(reader)
    assert meta.value("albumTitle") == "albumTitle"
    assert asked == [MetaDataKey.ALBUM_TITLE]


def test_no_reader_gives_none_for_every_key():
    meta = MediaMetaData()
    assert all(meta.value(key) is None for key in MetaDataKey)


def test_attribute_access_camel_and_snake():
    meta = MediaMetaData({MetaDataKey.ALBUM_ARTIST: "Band"})
    assert meta.albumArtist == "Band"
    assert meta.album_artist == "Band"


def test_unknown_key_raises():
    meta = MediaMetaData()
    with pytest.raises(KeyError):
        meta.value("bogusKey")
    with pytest.raises(AttributeError):
        meta.bogus_key


def test_key_values_are_property_names():
    assert MetaDataKey.SUB_TITLE.value == "subTitle"
    assert MetaDataKey("writer") is MetaDataKey.WRITER
    assert len({key.value for key in MetaDataKey}) == len(list(MetaDataKey))


def test_metadata_changed_notifies():
    meta = MediaMetaData()
    calls = []
    meta.listeners.append(lambda: calls.append("changed"))
    meta.metadata_changed()
    assert calls == ["changed"]