"""Argon2i hash-string codec."""

from hashstring.phc.codec import decode, encode, encoded_length, is_valid
from hashstring.phc.models import ParsedRecord

__all__ = [
    "ParsedRecord",
    "decode",
    "encode",
    "encoded_length",
    "is_valid",
]
