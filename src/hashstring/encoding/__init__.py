"""Low-level text encodings used by the hash-string grammar."""

from hashstring.encoding.base64_codec import (
    b64decode,
    b64encode,
    decode_base64,
    encode_base64,
    encoded_length,
)
from hashstring.encoding.decimal_parser import decode_decimal, parse_decimal

__all__ = [
    "b64decode",
    "b64encode",
    "decode_base64",
    "decode_decimal",
    "encode_base64",
    "encoded_length",
    "parse_decimal",
]
