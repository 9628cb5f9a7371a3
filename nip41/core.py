# nip41/core.py

import hashlib
from typing import Optional

from bip_utils import Bech32ChecksumError, Bech32Decoder, Bech32Encoder
from ecdsa import SECP256k1, VerifyingKey
from ecdsa.ellipticcurve import INFINITY
from ecdsa.errors import MalformedPointError

from .errors import CurveArithmeticOverflow

CURVE_ORDER = SECP256k1.order
GENERATOR = SECP256k1.generator
FIELD_PRIME = SECP256k1.curve.p()

KEY_LENGTH = 32

# SEC1 compressed prefixes
_EVEN = b"\x02"
_ODD = b"\x03"


# ---------- Scalars ----------

def scalar_from_bytes(data: bytes) -> int:
    """
    Interpret 32 bytes as a big-endian secret scalar.

    Raises CurveArithmeticOverflow if the value is zero or not below the
    curve order.
    """
    if len(data) != KEY_LENGTH:
        raise CurveArithmeticOverflow(f"scalar must be {KEY_LENGTH} bytes, got {len(data)}")
    value = int.from_bytes(data, "big")
    if value == 0 or value >= CURVE_ORDER:
        raise CurveArithmeticOverflow("scalar is zero or exceeds the curve order")
    return value


def tweak_from_hash(digest: bytes) -> int:
    """
    Interpret a commitment hash as a tweak scalar.

    Raises CurveArithmeticOverflow if it is zero or >= curve order.
    """
    diff = int.from_bytes(digest, "big")
    if diff == 0 or diff >= CURVE_ORDER:
        raise CurveArithmeticOverflow("tweak is zero or exceeds the curve order")
    return diff


def add_tweak(secret: bytes, diff: int) -> bytearray:
    """
    Scalar addition sk + diff (mod n). The tweak must already be range-checked.
    """
    tweaked = (scalar_from_bytes(secret) + diff) % CURVE_ORDER
    if tweaked == 0:
        raise CurveArithmeticOverflow("tweaked secret key is zero")
    return bytearray(tweaked.to_bytes(KEY_LENGTH, "big"))


# ---------- Points ----------

def xonly_pubkey(secret: bytes) -> bytes:
    """X-only public key (32-byte big-endian x coordinate) of a secret key."""
    point = GENERATOR * scalar_from_bytes(secret)
    return point.x().to_bytes(KEY_LENGTH, "big")


def lift_x(xonly: bytes, odd: bool):
    """
    Reconstruct the curve point for an x-only key with the given y parity.

    Raises MalformedPointError if x is not on the curve.
    """
    if len(xonly) != KEY_LENGTH:
        raise MalformedPointError("x-only public key must be 32 bytes")
    if int.from_bytes(xonly, "big") >= FIELD_PRIME:
        raise MalformedPointError("x coordinate exceeds the field size")
    prefix = _ODD if odd else _EVEN
    vk = VerifyingKey.from_string(prefix + xonly, curve=SECP256k1)
    return vk.pubkey.point


def add_exp_tweak_xonly(xonly: bytes, odd: bool, diff: int) -> Optional[bytes]:
    """
    Point addition P + diff*G on the lifted point, stripped back to x-only.

    Returns None when the result is the point at infinity.
    """
    point = (GENERATOR * diff) + lift_x(xonly, odd)
    if point == INFINITY:
        return None
    return point.x().to_bytes(KEY_LENGTH, "big")


# ---------- Commitment ----------

def commitment_hash(prev_visible: bytes, next_hidden: bytes) -> bytes:
    """
    SHA256(prev_visible || next_hidden) over two x-only public keys.

    The previous visible key always comes first.
    """
    return hashlib.sha256(bytes(prev_visible) + bytes(next_hidden)).digest()


# ---------- Bech32 (for npub / nsec) ----------

def npub_from_pubkey(pubkey: bytes) -> str:
    return Bech32Encoder.Encode("npub", bytes(pubkey))


def nsec_from_secret(secret: bytes) -> str:
    return Bech32Encoder.Encode("nsec", bytes(secret))


def pubkey_from_npub(npub: str) -> bytes:
    """
    Decode an npub back to the 32-byte x-only key.

    Raises ValueError on a bad checksum, wrong prefix or wrong length.
    """
    try:
        data = Bech32Decoder.Decode("npub", npub)
    except Bech32ChecksumError as exc:
        raise ValueError(f"invalid npub: {exc}") from exc
    if len(data) != KEY_LENGTH:
        raise ValueError("npub must encode 32 bytes")
    return data
