"""Configuration module for hashstring."""

from hashstring.config.settings import (
    MIN_ENCODE_CAPACITY,
    CodecSettings,
    Settings,
    get_settings,
    load_settings,
)

__all__ = [
    "MIN_ENCODE_CAPACITY",
    "CodecSettings",
    "Settings",
    "get_settings",
    "load_settings",
]
