import pytest

from config import MAX_SPIN
from obfuscation import clamp_spin, derive_default_spin


# ===================================
# 1. Spin clamping
# ===================================

def test_clamp_leaves_spins_in_range_untouched():
    for spin in (0, 1, 123_456_789, MAX_SPIN):
        assert clamp_spin(spin) == spin


def test_clamp_reduces_large_spins_with_modulo():
    assert clamp_spin(MAX_SPIN + 1) == 1
    assert clamp_spin(2 * MAX_SPIN) == 0
    assert clamp_spin(10**30) == 10**30 % MAX_SPIN


def test_clamp_is_idempotent_and_bounded():
    for spin in (0, 42, MAX_SPIN, MAX_SPIN + 7, 14124401111241, 10**40 + 3):
        once = clamp_spin(spin)
        assert once <= MAX_SPIN
        assert clamp_spin(once) == once


def test_clamp_rejects_invalid_spins():
    with pytest.raises(ValueError):
        clamp_spin(-1)
    with pytest.raises(ValueError):
        clamp_spin(1.5)
    with pytest.raises(ValueError):
        clamp_spin(True)


# ===================================
# 2. Default spin derivation
# ===================================

def test_default_spin_concatenates_letter_positions():
    # U is not a lowercase letter; s=18, e=4, r=17
    assert derive_default_spin("User") == 18417
    # o=14, s=18, t=19
    assert derive_default_spin("Post") == 141819


def test_default_spin_is_deterministic():
    assert derive_default_spin("User") == derive_default_spin("User")


def test_default_spin_differs_between_type_names():
    names = ["User", "Post", "Comment", "Invoice", "Admin::User", "Order"]
    spins = {derive_default_spin(name) for name in names}
    assert len(spins) == len(names)


def test_default_spin_only_uses_first_twelve_characters():
    assert derive_default_spin("abcdefghijklZZZ") == derive_default_spin("abcdefghijklmnop")


def test_default_spin_for_long_names_is_clamped():
    spin = derive_default_spin("SomeReallyAbsurdlyLongNamedClassThatYouWouldntHaveThoughtOfs")
    assert spin == 14124401111241 % MAX_SPIN
    assert spin <= MAX_SPIN


@pytest.mark.parametrize("name", ["", "ABC", "123", "::", "-_.", "日本語"])
def test_default_spin_without_letters_is_zero(name):
    assert derive_default_spin(name) == 0
