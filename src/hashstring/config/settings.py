from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hashstring.core.errors import ConfigurationError
from hashstring.core.types import MAX_HASH_STRING_LENGTH

# Length of "$argon2i$m=8,t=1,p=1" plus the terminator slot.
MIN_ENCODE_CAPACITY = 21

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class CodecSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HASHSTRING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    encode_capacity: int = Field(default=300, gt=0)
    log_level: str = Field(default="WARNING")

    @field_validator("encode_capacity")
    @classmethod
    def validate_encode_capacity(cls, v: int) -> int:
        if v < MIN_ENCODE_CAPACITY:
            raise ValueError(
                f"encode_capacity ({v}) must be at least {MIN_ENCODE_CAPACITY}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def fits_any_record(self) -> bool:
        return self.encode_capacity > MAX_HASH_STRING_LENGTH


class Settings(BaseSettings):
    """Composed settings with flat property access."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    codec: CodecSettings = Field(default_factory=CodecSettings)

    @property
    def encode_capacity(self) -> int:
        return self.codec.encode_capacity

    @property
    def log_level(self) -> str:
        return self.codec.log_level


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError("Invalid hashstring settings", cause=e) from e
