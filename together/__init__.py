"""Core helpers for a web-API chat client: pinyin initials, data and file
utilities, HTTP access, login sessions, list models, image loading and media
metadata."""

__version__ = "0.1.0"

__all__ = [
    "pinyin",
    "stdutil",
    "netmanager",
    "pipeline",
    "connector",
    "listmodel",
    "image",
    "metadata",
]