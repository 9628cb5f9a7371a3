# nip41/derivation.py

import logging
from typing import List

from bip_utils import (
    Bip32KeyError,
    Bip32Slip10Secp256k1,
    Bip32Utils,
    Bip39Languages,
    Bip39MnemonicEncoder,
    Bip39MnemonicValidator,
    Bip39SeedGenerator,
)
from nacl.utils import random as nacl_random

from .config import DERIVATION_PATH, ENTROPY_BYTES, N_DEFAULT, SEED_LENGTH
from .errors import InvalidSeedMaterial

logger = logging.getLogger(__name__)


def new_mnemonic() -> str:
    """
    Draw 256 bits of fresh entropy and encode them as a 24 word English mnemonic.
    """
    entropy = nacl_random(ENTROPY_BYTES)
    return str(Bip39MnemonicEncoder(Bip39Languages.ENGLISH).Encode(entropy))


def mnemonic_to_seed(words: str) -> bytes:
    """
    Validate a BIP-39 mnemonic (wordlist + checksum) and turn it into the
    64-byte master seed, with an empty passphrase.
    """
    normalized = " ".join(words.split())
    if not normalized or not Bip39MnemonicValidator().IsValid(normalized):
        raise InvalidSeedMaterial("invalid mnemonic: unknown word or bad checksum")
    return Bip39SeedGenerator(normalized).Generate("")


def derive_from_seed(seed: bytes, levels: int = N_DEFAULT) -> List[bytearray]:
    """
    Derive the raw hidden secrets of every level from a 64-byte master seed.

    Path: m/44'/1237'/41' followed by hardened children 0'..(levels-1)'.
    Pure function of (seed, levels).
    """
    if len(seed) != SEED_LENGTH:
        raise InvalidSeedMaterial(f"master seed must be {SEED_LENGTH} bytes, got {len(seed)}")
    if levels < 1:
        raise InvalidSeedMaterial(f"level count must be at least 1, got {levels}")

    try:
        # derive the common part only once
        account = Bip32Slip10Secp256k1.FromSeed(bytes(seed)).DerivePath(DERIVATION_PATH)
        secrets = []
        for i in range(levels):
            child = account.ChildKey(Bip32Utils.HardenIndex(i))
            secrets.append(bytearray(child.PrivateKey().Raw().ToBytes()))
    except Bip32KeyError as exc:
        raise InvalidSeedMaterial(f"HD derivation failed: {exc}") from exc

    logger.debug("derived %d hidden secrets along %s", levels, DERIVATION_PATH)
    return secrets


def derive_from_mnemonic(words: str, levels: int = N_DEFAULT) -> List[bytearray]:
    return derive_from_seed(mnemonic_to_seed(words), levels)
