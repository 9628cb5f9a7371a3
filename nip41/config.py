# nip41/config.py

# Number of pre-generated key levels
N_DEFAULT = 256

# purpose / coin type (nostr NIP-41 rotation) / account; children are hardened 0'..N-1'
DERIVATION_PATH = "m/44'/1237'/41'"

# BIP-39 seed output
SEED_LENGTH = 64

# 256 bits, encoded as a 24 word mnemonic
ENTROPY_BYTES = 32

# Kind number stamped on invalidation records printed by the CLI
INVALIDATION_KIND = 13
