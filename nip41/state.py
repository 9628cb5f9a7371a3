# nip41/state.py

import logging
from typing import List, NamedTuple

from .config import N_DEFAULT
from .derivation import derive_from_mnemonic, derive_from_seed, new_mnemonic
from .errors import ExhaustedLevels, KeyStateClosed
from .levels import LevelKeys, build_levels

logger = logging.getLogger(__name__)


class Invalidation(NamedTuple):
    """Public keys disclosed by one invalidation."""

    invalidated: bytes
    invalidated_hidden: bytes
    current: bytes
    history: List[bytes]


class KeyState:
    """
    Complete state of rotating keys: N pre-generated levels plus the cursor
    of the current level, initially N-1.

    Not thread-safe. Callers sharing one instance must serialise
    invalidate() and secret reads themselves.
    """

    def __init__(self, keys: List[LevelKeys]):
        self._keys = tuple(keys)
        self._n = len(self._keys) - 1
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise KeyStateClosed("key state has been closed")

    @property
    def current_level(self) -> int:
        self._check_open()
        return self._n

    def levels(self) -> int:
        return len(self._keys)

    def current_visible_pubkey(self) -> bytes:
        self._check_open()
        return self._keys[self._n].vis_pubkey

    def current_visible_secret_key(self) -> bytes:
        """Current secret key; security sensitive, do not keep it around or log it."""
        self._check_open()
        return bytes(self._keys[self._n].vis_secret)

    def visible_pubkeys(self) -> List[bytes]:
        self._check_open()
        return [level.vis_pubkey for level in self._keys]

    def invalidate(self) -> Invalidation:
        """
        Invalidate the current key, reveal its hidden counterpart and switch
        to the previous level.

        Returns the invalidated key, its hidden counterpart, the new current
        key and every key invalidated so far (the one just now first).
        """
        self._check_open()
        if self._n == 0:
            raise ExhaustedLevels("no more levels left, ran out of pre-generated keys")

        n_prev = self._n
        self._n = n_prev - 1
        invalidated = self._keys[n_prev]

        logger.info(
            "invalidated level %d (%s), current level is now %d",
            n_prev,
            invalidated.vis_pubkey.hex(),
            self._n,
        )
        return Invalidation(
            invalidated=invalidated.vis_pubkey,
            invalidated_hidden=invalidated.hid_pubkey,
            current=self._keys[self._n].vis_pubkey,
            history=[level.vis_pubkey for level in self._keys[n_prev:]],
        )

    def close(self) -> None:
        """Overwrite every held secret with zeros. The state is unusable afterwards."""
        if self._closed:
            return
        for level in self._keys:
            level.wipe()
        self._closed = True

    def __enter__(self) -> "KeyState":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"KeyState(levels={self.levels()}, current={self._n}, closed={self._closed})"


# ---------- Construction ----------

def _from_raw_secrets(raw_secrets: List[bytearray]) -> KeyState:
    try:
        return KeyState(build_levels(raw_secrets))
    finally:
        for raw in raw_secrets:
            raw[:] = bytes(len(raw))


def generate_from_seed(seed: bytes, levels: int = N_DEFAULT) -> KeyState:
    """Generate state from a 64-byte master seed."""
    return _from_raw_secrets(derive_from_seed(seed, levels))


def generate_from_mnemonic(words: str, levels: int = N_DEFAULT) -> KeyState:
    """Generate state from a space separated BIP-39 mnemonic."""
    return _from_raw_secrets(derive_from_mnemonic(words, levels))


def generate_random(levels: int = N_DEFAULT) -> KeyState:
    """
    Generate a new random state.

    Use new_mnemonic() + generate_from_mnemonic() instead when the mnemonic
    must be kept for recovery.
    """
    return generate_from_mnemonic(new_mnemonic(), levels)
