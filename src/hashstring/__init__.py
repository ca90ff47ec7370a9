"""hashstring - strict codec for Argon2i hash strings."""

__version__ = "0.1.0"

from hashstring.config import Settings, get_settings
from hashstring.core.errors import CapacityError, HashStringError, ParseError
from hashstring.phc import ParsedRecord, decode, encode, is_valid

__all__ = [
    "CapacityError",
    "HashStringError",
    "ParseError",
    "ParsedRecord",
    "Settings",
    "decode",
    "encode",
    "get_settings",
    "is_valid",
]
