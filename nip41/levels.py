# nip41/levels.py

import logging
from typing import List, Sequence

from .core import add_tweak, commitment_hash, tweak_from_hash, xonly_pubkey
from .errors import InvalidSeedMaterial

logger = logging.getLogger(__name__)


class LevelKeys:
    """
    Keys at a given level: a visible keypair (A) and a hidden keypair (A').

    Secrets are kept in bytearrays so that wipe() can overwrite them.
    """

    __slots__ = ("vis_secret", "vis_pubkey", "hid_secret", "hid_pubkey")

    def __init__(self, vis_secret: bytearray, hid_secret: bytearray):
        self.vis_secret = vis_secret
        self.hid_secret = hid_secret
        self.vis_pubkey = xonly_pubkey(vis_secret)
        if vis_secret is hid_secret:
            self.hid_pubkey = self.vis_pubkey
        else:
            self.hid_pubkey = xonly_pubkey(hid_secret)

    def wipe(self) -> None:
        for buf in (self.vis_secret, self.hid_secret):
            buf[:] = bytes(len(buf))

    def __repr__(self) -> str:
        return f"LevelKeys(vis={self.vis_pubkey.hex()}, hid={self.hid_pubkey.hex()})"


def first_level(hidden_secret: bytes) -> LevelKeys:
    """Level 0 has no predecessor to commit to: visible == hidden."""
    secret = bytearray(hidden_secret)
    return LevelKeys(vis_secret=secret, hid_secret=secret)


def next_level(prev: LevelKeys, hidden_secret: bytes) -> LevelKeys:
    """
    Build the level following `prev` from its hidden secret.

    sk_vis = sk_hid + SHA256(x(prev.vis) || x(hid)) mod n

    Raises CurveArithmeticOverflow if the hash is not a usable tweak.
    """
    hid_secret = bytearray(hidden_secret)
    diff = tweak_from_hash(commitment_hash(prev.vis_pubkey, xonly_pubkey(hid_secret)))
    vis_secret = add_tweak(hid_secret, diff)
    return LevelKeys(vis_secret=vis_secret, hid_secret=hid_secret)


def build_levels(raw_secrets: Sequence[bytes]) -> List[LevelKeys]:
    """
    Turn the hidden secrets of every level into the linked level table.

    The number of secrets is the number of levels.
    """
    if not raw_secrets:
        raise InvalidSeedMaterial("at least one raw secret is required")

    current = first_level(raw_secrets[0])
    keys = [current]
    for raw in raw_secrets[1:]:
        current = next_level(current, raw)
        keys.append(current)

    logger.debug("built %d key levels", len(keys))
    return keys
