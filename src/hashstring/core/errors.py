from hashstring.core.types import ErrorKind


class HashStringError(Exception):
    kind: ErrorKind = ErrorKind.GRAMMAR

    def __init__(
        self,
        message: str,
        position: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.position = position
        self.cause = cause

    def __str__(self) -> str:
        message = str(self.args[0])
        if self.position is not None:
            message = f"{message} at offset {self.position}"
        if self.cause:
            return f"{message} (caused by: {self.cause})"
        return message


class ParseError(HashStringError):
    """Any failure while decoding a hash string; the whole string is rejected."""


class GrammarError(ParseError):
    kind = ErrorKind.GRAMMAR


class NumericFormatError(ParseError):
    kind = ErrorKind.NUMERIC


class RangeViolationError(ParseError):
    kind = ErrorKind.RANGE

    def __init__(
        self,
        message: str,
        field: str | None = None,
        position: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, position, cause)
        self.field = field


class BinaryFormatError(ParseError):
    kind = ErrorKind.BINARY


class TrailingDataError(ParseError):
    kind = ErrorKind.TRAILING


class CapacityError(HashStringError):
    kind = ErrorKind.CAPACITY

    def __init__(
        self,
        message: str,
        required: int | None = None,
        available: int | None = None,
        position: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, position, cause)
        self.required = required
        self.available = available


class DecodeCapacityError(CapacityError, ParseError):
    """A decoded binary field does not fit its declared capacity."""


class ConfigurationError(HashStringError):
    kind = ErrorKind.CONFIGURATION
