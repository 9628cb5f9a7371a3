"""
Stable reference API for NIP-41 key test vectors.

This wraps the internal derivation / level / lineage implementation into a
minimal bytes-in, bytes-out surface that the vector generator and tests can
depend on.
"""

from typing import Dict

from nip41.core import commitment_hash as _commitment_hash_impl
from nip41.core import xonly_pubkey
from nip41.levels import LevelKeys, next_level
from nip41.lineage import verify
from nip41.state import generate_from_mnemonic, generate_from_seed


def sk_to_pk(sk: bytes) -> bytes:
    """
    Convert secret key bytes to x-only public key bytes.
    """
    return xonly_pubkey(sk)


def commitment_hash(sk_prev_vis: bytes, sk_next_hid: bytes) -> bytes:
    """
    Commitment hash over the public keys of two secret keys.
    """
    return _commitment_hash_impl(sk_to_pk(sk_prev_vis), sk_to_pk(sk_next_hid))


def next_level_secrets(sk_vis: bytes, sk_hid: bytes, sk_next_hid: bytes) -> Dict[str, bytes]:
    """
    Build the level after (sk_vis, sk_hid) from its hidden secret and return
    its raw secret and public keys.
    """
    current = LevelKeys(vis_secret=bytearray(sk_vis), hid_secret=bytearray(sk_hid))
    nxt = next_level(current, sk_next_hid)
    return {
        "vis_sk": bytes(nxt.vis_secret),
        "vis_pk": nxt.vis_pubkey,
        "hid_sk": bytes(nxt.hid_secret),
        "hid_pk": nxt.hid_pubkey,
        "prev_vis_pk": current.vis_pubkey,
    }


def seed_to_current_pubkey(seed: bytes) -> bytes:
    with generate_from_seed(seed) as state:
        return state.current_visible_pubkey()


def mnemonic_to_current_pubkey(words: str) -> bytes:
    with generate_from_mnemonic(words) as state:
        return state.current_visible_pubkey()


def verify_hex(next_visible_hex: str, next_hidden_hex: str, prev_visible_hex: str) -> bool:
    return verify(
        bytes.fromhex(next_visible_hex),
        bytes.fromhex(next_hidden_hex),
        bytes.fromhex(prev_visible_hex),
    )
