import codecs
from typing import Final

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_BYTE_ENCODING, DEFAULT_LOG_DIR, ENV_PREFIX


class Settings(BaseSettings):
    """Library settings loaded from environment variables and .env files."""

    # Logging configuration
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str | None = Field(
        default=None, description="Log level override (e.g. 'WARNING')"
    )
    log_to_file: bool = Field(
        default=False, description="Also write logs to a file in log_dir"
    )
    log_dir: str = Field(default=DEFAULT_LOG_DIR, description="Log file directory")

    # Measurement configuration
    byte_encoding: str = Field(
        default=DEFAULT_BYTE_ENCODING,
        description="Encoding used when counting the bytes of a string",
    )

    @field_validator("byte_encoding")
    @classmethod
    def validate_byte_encoding(cls, v: str) -> str:
        """Accept only text encodings that encode the empty string to no bytes."""
        try:
            name = codecs.lookup(v).name
            encoded = "".encode(name)
        except LookupError as e:
            raise ValueError(f"Unknown byte encoding: {v!r}") from e
        if encoded:
            # Encodings such as utf-16 prepend a byte order mark
            raise ValueError(
                f"Byte encoding {v!r} adds bytes to every string; "
                + "use an endian-specific variant"
            )
        return name

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug


# Global settings instance
settings: Final = Settings()
