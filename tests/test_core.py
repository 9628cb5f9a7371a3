import pytest

from nip41.core import (
    CURVE_ORDER,
    add_exp_tweak_xonly,
    add_tweak,
    commitment_hash,
    npub_from_pubkey,
    nsec_from_secret,
    pubkey_from_npub,
    scalar_from_bytes,
    tweak_from_hash,
    xonly_pubkey,
)
from nip41.errors import CurveArithmeticOverflow

from .conftest import KEY1, KEY2


def test_xonly_pubkey_vector():
    pk1 = xonly_pubkey(bytes.fromhex(KEY1))
    assert pk1.hex() == "3053cfbe7bedc6a9ef920d91e11b9c8c5bb9270bb9546e14ca3eeef624d78677"


def test_tweaked_secret_and_public_keys_detailed():
    sk1 = bytes.fromhex(KEY1)
    pk1 = xonly_pubkey(sk1)

    sk2 = add_tweak(sk1, 1)
    assert sk2.hex() == "0b441d3662962b4060e15801da6edbf017c14574a03ce8076ceb565fbdad12c2"

    pk2 = xonly_pubkey(sk2)
    assert pk2.hex() == "e00d187b6f23ce28dad827ad336a3fb885146c1679c0d856cb0d4f094ae057c0"

    # tweaked public key, lifted with even y
    pk3 = add_exp_tweak_xonly(pk1, False, 1)
    assert pk3 == pk2


@pytest.mark.parametrize("diff", [1, 2, 0x204, 2**200 + 12345])
def test_tweaked_secret_matches_tweaked_public(diff):
    sk1 = bytes.fromhex(KEY1)
    pk1 = xonly_pubkey(sk1)

    pk2 = xonly_pubkey(add_tweak(sk1, diff))
    candidates = {
        add_exp_tweak_xonly(pk1, False, diff),
        add_exp_tweak_xonly(pk1, True, diff),
    }
    assert pk2 in candidates


def test_commitment_hash_vector():
    pk1 = xonly_pubkey(bytes.fromhex(KEY1))
    pk2 = xonly_pubkey(bytes.fromhex(KEY2))

    digest = commitment_hash(pk1, pk2)
    assert digest.hex() == "6d19c6173b3d59014fab1ec77d4dad98f5cd515d74b0512aab71b3c38a806deb"
    # order is part of the commitment
    assert commitment_hash(pk2, pk1) != digest


def test_tweak_from_hash_rejects_out_of_range():
    with pytest.raises(CurveArithmeticOverflow):
        tweak_from_hash(bytes(32))
    with pytest.raises(CurveArithmeticOverflow):
        tweak_from_hash(CURVE_ORDER.to_bytes(32, "big"))
    with pytest.raises(CurveArithmeticOverflow):
        tweak_from_hash(b"\xff" * 32)

    assert tweak_from_hash((CURVE_ORDER - 1).to_bytes(32, "big")) == CURVE_ORDER - 1


def test_scalar_from_bytes_rejects_invalid():
    with pytest.raises(CurveArithmeticOverflow):
        scalar_from_bytes(bytes(32))
    with pytest.raises(CurveArithmeticOverflow):
        scalar_from_bytes(b"\x01" * 31)


def test_add_tweak_to_zero_is_overflow():
    # sk + (n - sk) == 0 mod n
    sk = bytes.fromhex(KEY1)
    diff = CURVE_ORDER - int.from_bytes(sk, "big")
    with pytest.raises(CurveArithmeticOverflow):
        add_tweak(sk, diff)


def test_npub_roundtrip():
    pk = xonly_pubkey(bytes.fromhex(KEY1))
    npub = npub_from_pubkey(pk)

    assert npub.startswith("npub1")
    assert pubkey_from_npub(npub) == pk


def test_npub_bad_checksum():
    npub = npub_from_pubkey(xonly_pubkey(bytes.fromhex(KEY1)))
    corrupted = npub[:-1] + ("q" if npub[-1] != "q" else "p")

    with pytest.raises(ValueError):
        pubkey_from_npub(corrupted)


def test_nsec_prefix():
    assert nsec_from_secret(bytes.fromhex(KEY1)).startswith("nsec1")
