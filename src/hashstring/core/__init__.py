"""Core types, limits and errors shared by the hash-string codec."""

from hashstring.core.buffer import OutputBuffer
from hashstring.core.errors import (
    BinaryFormatError,
    CapacityError,
    ConfigurationError,
    DecodeCapacityError,
    GrammarError,
    HashStringError,
    NumericFormatError,
    ParseError,
    RangeViolationError,
    TrailingDataError,
)
from hashstring.core.types import ErrorKind, RecordShape

__all__ = [
    "OutputBuffer",
    "ErrorKind",
    "RecordShape",
    "BinaryFormatError",
    "CapacityError",
    "ConfigurationError",
    "DecodeCapacityError",
    "GrammarError",
    "HashStringError",
    "NumericFormatError",
    "ParseError",
    "RangeViolationError",
    "TrailingDataError",
]
