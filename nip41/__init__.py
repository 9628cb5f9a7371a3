# nip41/__init__.py

from .config import N_DEFAULT
from .core import (
    commitment_hash,
    npub_from_pubkey,
    nsec_from_secret,
    pubkey_from_npub,
    xonly_pubkey,
)
from .derivation import (
    derive_from_mnemonic,
    derive_from_seed,
    new_mnemonic,
)
from .errors import (
    CurveArithmeticOverflow,
    ExhaustedLevels,
    InvalidSeedMaterial,
    KeyStateClosed,
    Nip41Error,
)
from .levels import LevelKeys, build_levels, next_level
from .lineage import (
    invalidation_to_dict,
    verify,
    verify_invalidation,
)
from .state import (
    Invalidation,
    KeyState,
    generate_from_mnemonic,
    generate_from_seed,
    generate_random,
)

__all__ = [
    "N_DEFAULT",
    "commitment_hash",
    "npub_from_pubkey",
    "nsec_from_secret",
    "pubkey_from_npub",
    "xonly_pubkey",
    "derive_from_mnemonic",
    "derive_from_seed",
    "new_mnemonic",
    "CurveArithmeticOverflow",
    "ExhaustedLevels",
    "InvalidSeedMaterial",
    "KeyStateClosed",
    "Nip41Error",
    "LevelKeys",
    "build_levels",
    "next_level",
    "invalidation_to_dict",
    "verify",
    "verify_invalidation",
    "Invalidation",
    "KeyState",
    "generate_from_mnemonic",
    "generate_from_seed",
    "generate_random",
]
