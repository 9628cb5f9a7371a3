# nip41/lineage.py

import binascii
from typing import Dict, List, Optional

from ecdsa.ecdsa import InvalidPointError
from ecdsa.errors import MalformedPointError

from .config import INVALIDATION_KIND
from .core import KEY_LENGTH, add_exp_tweak_xonly, commitment_hash, tweak_from_hash
from .errors import CurveArithmeticOverflow
from .state import Invalidation


def verify(next_visible: bytes, next_hidden: bytes, prev_visible: bytes) -> bool:
    """
    Verify a newly rotated key.

    `next_visible` is the key being invalidated, `next_hidden` its revealed
    hidden counterpart and `prev_visible` the key taking over. Checks
    next_visible == next_hidden + SHA256(prev_visible || next_hidden) * G.

    X-only keys drop the y parity, so the hidden key is lifted both ways.

    Returns:
        True if valid, False otherwise (including malformed input).
    """
    for key in (next_visible, next_hidden, prev_visible):
        if not isinstance(key, (bytes, bytearray)) or len(key) != KEY_LENGTH:
            return False

    try:
        diff = tweak_from_hash(commitment_hash(prev_visible, next_hidden))
    except CurveArithmeticOverflow:
        return False

    try:
        pk_next_odd = add_exp_tweak_xonly(next_hidden, True, diff)
        pk_next_even = add_exp_tweak_xonly(next_hidden, False, diff)
    except (MalformedPointError, InvalidPointError):
        return False

    target = bytes(next_visible)
    return pk_next_odd == target or pk_next_even == target


def invalidation_to_dict(invalidation: Invalidation, kind: int = INVALIDATION_KIND) -> Dict:
    """
    JSON-able record of one invalidation.

    - kind: INVALIDATION_KIND
    - invalidated: hex of the key being invalidated
    - hidden: hex of its hidden counterpart
    - current: hex of the key taking over
    - history: hex of every invalidated key so far, newest first
    """
    return {
        "kind": kind,
        "invalidated": invalidation.invalidated.hex(),
        "hidden": invalidation.invalidated_hidden.hex(),
        "current": invalidation.current.hex(),
        "history": [pk.hex() for pk in invalidation.history],
    }


def _unhex_key(value) -> Optional[bytes]:
    if not isinstance(value, str):
        return None
    try:
        raw = binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        return None
    if len(raw) != KEY_LENGTH:
        return None
    return raw


def verify_invalidation(record: Dict) -> bool:
    """
    Verify an invalidation record as produced by invalidation_to_dict().

    Steps:
    - kind must be INVALIDATION_KIND
    - invalidated / hidden / current must be 32-byte hex keys
    - history, if present, must start with the invalidated key
    - the hidden key must prove the rotation to `current`
    """
    if not isinstance(record, dict) or record.get("kind") != INVALIDATION_KIND:
        return False

    invalidated = _unhex_key(record.get("invalidated"))
    hidden = _unhex_key(record.get("hidden"))
    current = _unhex_key(record.get("current"))
    if invalidated is None or hidden is None or current is None:
        return False

    history: List = record.get("history", [invalidated.hex()])
    if not isinstance(history, list) or not history:
        return False
    if _unhex_key(history[0]) != invalidated:
        return False

    return verify(invalidated, hidden, current)
