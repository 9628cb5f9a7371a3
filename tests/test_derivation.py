import pytest

from nip41.config import N_DEFAULT
from nip41.derivation import (
    derive_from_mnemonic,
    derive_from_seed,
    mnemonic_to_seed,
    new_mnemonic,
)
from nip41.errors import InvalidSeedMaterial, Nip41Error

from .conftest import MNEMO1


def test_derive_from_seed_is_deterministic(seed1):
    first = derive_from_seed(seed1)
    second = derive_from_seed(seed1)

    assert len(first) == N_DEFAULT
    assert first == second
    assert all(len(sk) == 32 for sk in first)
    assert len(set(bytes(sk) for sk in first)) == N_DEFAULT


def test_fewer_levels_is_a_prefix(seed1):
    short = derive_from_seed(seed1, levels=4)
    longer = derive_from_seed(seed1, levels=8)

    assert short == longer[:4]


@pytest.mark.parametrize("length", [0, 16, 32, 63, 65])
def test_wrong_seed_length(length):
    with pytest.raises(InvalidSeedMaterial):
        derive_from_seed(b"\x01" * length)


def test_invalid_seed_material_is_a_value_error(seed1):
    with pytest.raises(ValueError):
        derive_from_seed(seed1, levels=0)
    assert issubclass(InvalidSeedMaterial, Nip41Error)


def test_bad_mnemonic_checksum():
    with pytest.raises(InvalidSeedMaterial):
        mnemonic_to_seed(" ".join(["abandon"] * 12))


def test_unknown_mnemonic_word():
    with pytest.raises(InvalidSeedMaterial):
        derive_from_mnemonic("oil oil oil oil oil oil oil oil oil oil oil notaword")


def test_empty_mnemonic():
    with pytest.raises(InvalidSeedMaterial):
        mnemonic_to_seed("   ")


def test_mnemonic_whitespace_is_normalized():
    assert mnemonic_to_seed("  " + MNEMO1.replace(" ", "   ") + "\n") == mnemonic_to_seed(MNEMO1)


def test_mnemonic_to_seed_length():
    assert len(mnemonic_to_seed(MNEMO1)) == 64


def test_new_mnemonic():
    words = new_mnemonic()

    assert len(words.split()) == 24
    assert len(mnemonic_to_seed(words)) == 64
    assert new_mnemonic() != words
