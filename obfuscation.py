"""
Spin handling for the id obfuscation layer.

A "spin" is the integer that keys the permutation for one entity type. Every
spin is clamped into [0, MAX_SPIN] before it reaches the permutation, and a
type without an explicit spin gets one derived from its name so that
different types produce different tokens for the same id.
"""
import string

from config import MAX_SPIN, DEFAULT_SPIN_NAME_LENGTH

ALPHABET = string.ascii_lowercase


def clamp_spin(spin: int) -> int:
    """Reduces a spin into the range accepted by the permutation primitive."""
    if isinstance(spin, bool) or not isinstance(spin, int):
        raise ValueError(f"Spin must be an integer, got {type(spin).__name__}.")
    if spin < 0:
        raise ValueError("Spin must be zero or positive.")
    if spin > MAX_SPIN:
        return spin % MAX_SPIN
    return spin


def derive_default_spin(type_name: str) -> int:
    """
    Builds a spin from the alphabet positions of the type name's letters.

    Only the first DEFAULT_SPIN_NAME_LENGTH characters count. Lowercase ASCII
    letters contribute their position (a=0 ... z=25) as decimal digits, which
    are concatenated rather than summed; any other character contributes
    nothing. A name with no lowercase letters yields 0.
    """
    digits = "".join(
        str(ALPHABET.index(char))
        for char in type_name[:DEFAULT_SPIN_NAME_LENGTH]
        if char in ALPHABET
    )
    return clamp_spin(int(digits) if digits else 0)
