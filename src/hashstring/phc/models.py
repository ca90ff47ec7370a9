from pydantic import BaseModel, ConfigDict, Field, model_validator

from hashstring.core.types import (
    ASSOCIATED_DATA_CAPACITY,
    KEY_ID_CAPACITY,
    MAX_COST,
    MAX_PARALLELISM,
    MEMORY_PER_LANE,
    MIN_COST,
    MIN_PARALLELISM,
    OUTPUT_CAPACITY,
    OUTPUT_MIN_LENGTH,
    SALT_CAPACITY,
    SALT_MIN_LENGTH,
    RecordShape,
)


class ParsedRecord(BaseModel):
    """Parameters, identifiers, salt and output carried by one hash string.

    An empty byte field is absent from the text form.
    """

    model_config = ConfigDict(frozen=True)

    m: int = Field(ge=MIN_COST, le=MAX_COST)
    t: int = Field(ge=MIN_COST, le=MAX_COST)
    p: int = Field(ge=MIN_PARALLELISM, le=MAX_PARALLELISM)
    key_id: bytes = Field(default=b"", max_length=KEY_ID_CAPACITY)
    associated_data: bytes = Field(default=b"", max_length=ASSOCIATED_DATA_CAPACITY)
    salt: bytes = Field(default=b"", max_length=SALT_CAPACITY)
    output: bytes = Field(default=b"", max_length=OUTPUT_CAPACITY)

    @model_validator(mode="after")
    def check_invariants(self) -> "ParsedRecord":
        if self.m < MEMORY_PER_LANE * self.p:
            raise ValueError(
                f"m ({self.m}) must be at least {MEMORY_PER_LANE} * p ({self.p})"
            )
        if 0 < len(self.salt) < SALT_MIN_LENGTH:
            raise ValueError(f"salt must be at least {SALT_MIN_LENGTH} bytes")
        if 0 < len(self.output) < OUTPUT_MIN_LENGTH:
            raise ValueError(f"output must be at least {OUTPUT_MIN_LENGTH} bytes")
        if self.output and not self.salt:
            raise ValueError("output requires a salt")
        return self

    @property
    def shape(self) -> RecordShape:
        return RecordShape.from_lengths(len(self.salt), len(self.output))

    @property
    def has_key_id(self) -> bool:
        return len(self.key_id) > 0

    @property
    def has_associated_data(self) -> bool:
        return len(self.associated_data) > 0
