"""Read-only access to media metadata by well-known keys."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

__all__ = ["MetaDataKey", "MediaMetaData"]


class MetaDataKey(enum.Enum):
    """Metadata keys; each value is the key's camel-case property name."""

    TITLE = "title"
    SUB_TITLE = "subTitle"
    AUTHOR = "author"
    COMMENT = "comment"
    DESCRIPTION = "description"
    CATEGORY = "category"
    GENRE = "genre"
    YEAR = "year"
    DATE = "date"
    USER_RATING = "userRating"
    KEYWORDS = "keywords"
    LANGUAGE = "language"
    PUBLISHER = "publisher"
    COPYRIGHT = "copyright"
    PARENTAL_RATING = "parentalRating"
    RATING_ORGANISATION = "ratingOrganisation"
    SIZE = "size"
    MEDIA_TYPE = "mediaType"
    DURATION = "duration"
    AUDIO_BIT_RATE = "audioBitRate"
    AUDIO_CODEC = "audioCodec"
    AVERAGE_LEVEL = "averageLevel"
    CHANNEL_COUNT = "channelCount"
    PEAK_VALUE = "peakValue"
    SAMPLE_RATE = "sampleRate"
    ALBUM_TITLE = "albumTitle"
    ALBUM_ARTIST = "albumArtist"
    CONTRIBUTING_ARTIST = "contributingArtist"
    COMPOSER = "composer"
    CONDUCTOR = "conductor"
    LYRICS = "lyrics"
    MOOD = "mood"
    TRACK_NUMBER = "trackNumber"
    TRACK_COUNT = "trackCount"
    COVER_ART_URL_SMALL = "coverArtUrlSmall"
    COVER_ART_URL_LARGE = "coverArtUrlLarge"
    RESOLUTION = "resolution"
    PIXEL_ASPECT_RATIO = "pixelAspectRatio"
    VIDEO_FRAME_RATE = "videoFrameRate"
    VIDEO_BIT_RATE = "videoBitRate"
    VIDEO_CODEC = "videoCodec"
    POSTER_URL = "posterUrl"
    CHAPTER_NUMBER = "chapterNumber"
    DIRECTOR = "director"
    LEAD_PERFORMER = "leadPerformer"
    WRITER = "writer"


Reader = Union[Mapping[MetaDataKey, Any], Callable[[MetaDataKey], Any]]


def _resolve(key: Union[MetaDataKey, str]) -> MetaDataKey:
    if isinstance(key, MetaDataKey):
        return key
    try:
        return MetaDataKey(key)
    except ValueError:
        pass
    try:
        return MetaDataKey[str(key).upper()]
    except KeyError:
        raise KeyError(f"unknown metadata key: {key!r}") from None


class MediaMetaData:
    """Looks up metadata values through a reader.

    The reader is a mapping or a callable keyed by :class:`MetaDataKey`;
    without one every value is ``None``. Values are also available as
    attributes by camel-case or snake-case name, e.g. ``meta.albumTitle``
    or ``meta.album_title``.
    """

    def __init__(self, reader: Optional[Reader] = None) -> None:
        self._reader = reader
        self.listeners: list[Callable[[], None]] = []

    def value(self, key: Union[MetaDataKey, str]) -> Any:
        """Return the value for *key*, or ``None`` when it is not available."""
        resolved = _resolve(key)
        reader = self._reader
        if reader is None:
            return None
        if isinstance(reader, Mapping):
            return reader.get(resolved)
        return reader(resolved)

    def metadata_changed(self) -> None:
        """Tell listeners that the metadata has changed."""
        for listener in list(self.listeners):
            listener()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            key = _resolve(name)
        except KeyError:
            raise AttributeError(name) from None
        return self.value(key)