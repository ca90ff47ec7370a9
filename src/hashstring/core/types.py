from enum import Enum

ALGORITHM_ID = "argon2i"

MAX_UNSIGNED = (1 << 64) - 1

MIN_COST = 1
MAX_COST = (1 << 32) - 1
MIN_PARALLELISM = 1
MAX_PARALLELISM = 255
MEMORY_PER_LANE = 8

KEY_ID_CAPACITY = 8
ASSOCIATED_DATA_CAPACITY = 32
SALT_MIN_LENGTH = 8
SALT_CAPACITY = 48
OUTPUT_MIN_LENGTH = 12
OUTPUT_CAPACITY = 64

# "$argon2i$m=4294967295,t=4294967295,p=255" plus every optional field at capacity
MAX_HASH_STRING_LENGTH = 259


class ErrorKind(str, Enum):
    GRAMMAR = "grammar"
    NUMERIC = "numeric"
    RANGE = "range"
    BINARY = "binary"
    CAPACITY = "capacity"
    TRAILING = "trailing"
    CONFIGURATION = "configuration"


class RecordShape(str, Enum):
    PARAMETERS = "parameters"
    SALTED = "salted"
    FULL = "full"

    @classmethod
    def from_lengths(cls, salt_len: int, output_len: int) -> "RecordShape":
        if salt_len == 0:
            return cls.PARAMETERS
        if output_len == 0:
            return cls.SALTED
        return cls.FULL

    @property
    def has_salt(self) -> bool:
        return self is not RecordShape.PARAMETERS

    @property
    def has_output(self) -> bool:
        return self is RecordShape.FULL
