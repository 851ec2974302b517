"""
Handles the encoding and decoding of database IDs into prefixed, non-sequential
and reversible tokens such as ``user-Xk9mQ``.

The digit scrambling itself is delegated to the hashids library, keyed by the
type's spin. This is an obfuscation layer, not encryption: do not rely on it
for access control.
"""
from typing import Any, Optional, Protocol
from functools import lru_cache

from hashids import Hashids

from config import Settings, get_settings, TOKEN_DELIMITER
from errors import InvalidTokenError
from obfuscation import clamp_spin


class Permutation(Protocol):
    """A bijection between non-negative integers and strings, keyed by a spin."""

    def permute(self, n: int, spin: int) -> str:
        ...

    def unpermute(self, s: str, spin: int) -> int:
        ...


@lru_cache(maxsize=256)
def _hashids_for(salt: str, alphabet: str, min_length: int) -> Hashids:
    return Hashids(salt=salt, min_length=min_length, alphabet=alphabet)


class HashidsPermutation:
    """Permutation backed by hashids, with the spin folded into the salt."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _hashids(self, spin: int) -> Hashids:
        return _hashids_for(
            f"{self.settings.hashids_salt}{spin}",
            self.settings.hashids_alphabet,
            self.settings.hashids_min_length,
        )

    def permute(self, n: int, spin: int) -> str:
        return self._hashids(spin).encode(n)

    def unpermute(self, s: str, spin: int) -> int:
        decoded_tuple = self._hashids(spin).decode(s)
        # hashids.decode returns () for anything it did not produce, e.g. (123,) otherwise
        if len(decoded_tuple) != 1:
            raise InvalidTokenError(f"'{s}' is not a valid obfuscated id.")
        return decoded_tuple[0]


@lru_cache()
def get_permutation() -> Permutation:
    """
    Returns a cached, singleton permutation built from the current settings.
    Clear with get_permutation.cache_clear() together with get_settings.
    """
    return HashidsPermutation(get_settings())


def token_prefix(prefix: str) -> str:
    return f"{prefix}{TOKEN_DELIMITER}"


def is_obfuscated(value: Any, prefix: str) -> bool:
    """True when the value carries the type's token prefix."""
    return str(value).startswith(token_prefix(prefix))


def encode(n: int, prefix: str, spin: int, permutation: Optional[Permutation] = None) -> str:
    """Encodes a stored integer ID into its public token."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"ID must be an integer, got {type(n).__name__}.")
    if n < 0:
        raise ValueError("ID must be zero or positive.")
    permutation = permutation or get_permutation()
    return token_prefix(prefix) + permutation.permute(n, clamp_spin(spin))


def decode(token_or_id: Any, prefix: str, spin: int, permutation: Optional[Permutation] = None) -> Any:
    """
    Decodes a token back into its integer ID.

    Values without the prefix are returned unchanged so raw IDs keep working;
    whether they are acceptable is the resolver's decision, not the codec's.
    """
    if not is_obfuscated(token_or_id, prefix):
        return token_or_id
    body = str(token_or_id)[len(token_prefix(prefix)):]
    permutation = permutation or get_permutation()
    return permutation.unpermute(body, clamp_spin(spin))
