import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ============================================================================
# CONSTANTS
# ============================================================================

# Largest spin handed to the permutation primitive (9 decimal digits).
MAX_SPIN: int = 999_999_999

# Only the first N characters of a type name contribute to its default spin.
DEFAULT_SPIN_NAME_LENGTH: int = 12

# Separates a type prefix from the permuted body of a token.
TOKEN_DELIMITER: str = "-"

# Same alphabet hashids ships with by default.
DEFAULT_ALPHABET: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

# ============================================================================
# SETTINGS
# ============================================================================


class Settings(BaseSettings):
    """Runtime settings for the token codec, read from OBFUSCATE_ID_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="OBFUSCATE_ID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hashids_alphabet: str = DEFAULT_ALPHABET
    hashids_min_length: int = 0
    # Mixed into every salt; changing it changes every token ever issued.
    hashids_salt: str = ""
    log_level: str = "INFO"

    @field_validator("hashids_alphabet")
    @classmethod
    def validate_alphabet(cls, value: str) -> str:
        if TOKEN_DELIMITER in value:
            raise ValueError(f"Alphabet must not contain the token delimiter '{TOKEN_DELIMITER}'")
        if len(set(value)) < 16:
            raise ValueError("Alphabet must contain at least 16 unique characters")
        return value

    @field_validator("hashids_min_length")
    @classmethod
    def validate_min_length(cls, value: int) -> int:
        if value < 0:
            raise ValueError("hashids_min_length must be zero or positive")
        return value


@lru_cache()
def get_settings() -> Settings:
    """
    Returns a cached, singleton instance of the settings.
    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()


# ============================================================================
# LOGGING
# ============================================================================

# Shared by every module in the package; handlers are only attached by setup_logging().
logger = logging.getLogger("obfuscate_ids")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a console handler to the package logger (idempotent)."""
    logger.setLevel(level or get_settings().log_level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
