import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from config import MAX_SPIN, logger
from errors import ConfigurationError
from obfuscation import clamp_spin, derive_default_spin

# Namespace separators across the naming styles we see: Ruby/C++ "::", dotted
# Python paths and slash-separated resource names.
NAMESPACE_SEPARATORS = re.compile(r"::|[./\\-]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def clean_name(type_name: str) -> str:
    """
    Normalizes a type name into a URL-friendly prefix.

    >>> clean_name("Admin::UserProfile")
    'admin_user_profile'
    """
    name = NAMESPACE_SEPARATORS.sub("_", type_name.strip())
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


class TypeConfig(BaseModel):
    """Obfuscation settings shared by every record of one entity type."""
    model_config = ConfigDict(frozen=True)

    type_name: str
    prefix: str = Field(..., min_length=1)
    spin: int = Field(..., ge=0, le=MAX_SPIN)
    enforce_obfuscated: bool = False
    raise_on_violation: bool = False

    @field_validator('prefix')
    def validate_prefix(cls, v):
        if not v.strip():
            raise ValueError("Prefix cannot be blank")
        return v


def configure(
    type_name: str,
    *,
    spin: Optional[int] = None,
    prefix: Optional[str] = None,
    enforce_obfuscated: bool = False,
    raise_on_violation: bool = False,
) -> TypeConfig:
    """
    Builds the configuration for one entity type.

    Enforcement needs a stable prefix to check incoming IDs against, so it is
    only accepted together with an explicit ``prefix``. Without a spin, one is
    derived from ``type_name``; explicit spins are clamped.

    Raises:
        ConfigurationError: on a missing prefix under enforcement, an empty
            resolved prefix or an invalid spin.
    """
    if enforce_obfuscated and not (prefix and prefix.strip()):
        raise ConfigurationError("Option 'prefix' must be set when 'enforce_obfuscated' is true")

    if spin is None:
        final_spin = derive_default_spin(type_name)
    else:
        try:
            final_spin = clamp_spin(spin)
        except ValueError as e:
            raise ConfigurationError(f"Invalid spin for {type_name!r}: {e}") from e

    final_prefix = prefix if prefix is not None else clean_name(type_name)
    if not final_prefix.strip():
        raise ConfigurationError(f"Cannot derive a prefix from type name {type_name!r}; pass 'prefix' explicitly")

    try:
        type_config = TypeConfig(
            type_name=type_name,
            prefix=final_prefix,
            spin=final_spin,
            enforce_obfuscated=enforce_obfuscated,
            raise_on_violation=raise_on_violation,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration for {type_name!r}: {e}") from e

    logger.info(
        f"Configured obfuscation for {type_name!r} (prefix={type_config.prefix!r}, "
        f"enforce_obfuscated={enforce_obfuscated}, raise_on_violation={raise_on_violation})"
    )
    return type_config
