"""
Lookup-time resolution of externally supplied identifiers.

resolve() is the seam between untrusted input (URL segments, API payloads)
and the store: it decodes tokens, applies the type's enforcement policy and
hands back the integer IDs the store should look up.
"""
from typing import Any, List, Optional, Sequence, Union

from config import logger
from encoding import Permutation, decode, is_obfuscated, token_prefix
from errors import InvalidTokenError, NonObfuscatedIdError, RecordNotFoundError
from models import TypeConfig

Identifier = Union[str, int]


def _check_enforcement(value: Any, config: TypeConfig) -> None:
    if not config.enforce_obfuscated or is_obfuscated(value, config.prefix):
        return
    logger.debug(f"Rejected non-obfuscated ID for {config.type_name!r}")
    if config.raise_on_violation:
        raise NonObfuscatedIdError(
            f"{config.type_name} requires obfuscated IDs with prefix '{token_prefix(config.prefix)}'"
        )
    # Same signal as a missing record, so callers cannot probe the policy.
    raise RecordNotFoundError(f"Couldn't find {config.type_name} with non-obfuscated ID")


def _to_int(value: Any, config: TypeConfig) -> int:
    if isinstance(value, bool):
        raise RecordNotFoundError(f"Couldn't find {config.type_name} with ID={value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise RecordNotFoundError(f"Couldn't find {config.type_name} with ID={value!r}") from None


def deobfuscate_id(value: Any, config: TypeConfig, permutation: Optional[Permutation] = None) -> int:
    """
    Resolves a single identifier to an integer ID.

    Raises:
        NonObfuscatedIdError: raw ID under enforcement with raise_on_violation.
        RecordNotFoundError: raw ID under silent enforcement, or an ID that
            neither decodes nor parses as an integer.
    """
    _check_enforcement(value, config)
    try:
        decoded = decode(value, config.prefix, config.spin, permutation)
    except InvalidTokenError:
        raise RecordNotFoundError(f"Couldn't find {config.type_name} with ID={value!r}") from None
    return _to_int(decoded, config)


def resolve(
    value: Union[Identifier, Sequence[Identifier]],
    config: TypeConfig,
    permutation: Optional[Permutation] = None,
) -> Union[int, List[int]]:
    """
    Resolves one identifier or a sequence of them.

    Sequences map 1:1 in order, without deduplication; an empty sequence
    resolves to an empty list even under enforcement.
    """
    if isinstance(value, (list, tuple)):
        return [deobfuscate_id(v, config, permutation) for v in value]
    return deobfuscate_id(value, config, permutation)
