#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Dict
import sys

# Add repo root so Python can import nip41.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Project imports: use the stable reference API
from nip41.reference_api import (
    sk_to_pk,
    commitment_hash,
    next_level_secrets,
    seed_to_current_pubkey,
    mnemonic_to_current_pubkey,
)

VECTORS_PATH = ROOT / "tests" / "vectors" / "nip41.v1.json"


def load_vectors() -> Dict[str, Any]:
    with VECTORS_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_vectors(data: Dict[str, Any]) -> None:
    # Pretty-print and keep key order stable
    with VECTORS_PATH.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=False)
        f.write("\n")


def populate_states(data: Dict[str, Any]) -> None:
    for entry in data.get("seeds", []):
        seed = bytes.fromhex(entry["seed_hex"])
        entry["current_pk_hex"] = seed_to_current_pubkey(seed).hex()

    for entry in data.get("mnemonics", []):
        entry["current_pk_hex"] = mnemonic_to_current_pubkey(entry["words"]).hex()


def populate_keys(data: Dict[str, Any]) -> None:
    for entry in data.get("pubkeys", []):
        entry["pk_hex"] = sk_to_pk(bytes.fromhex(entry["sk_hex"])).hex()

    for entry in data.get("commitments", []):
        digest = commitment_hash(
            bytes.fromhex(entry["prev_vis_sk_hex"]),
            bytes.fromhex(entry["next_hid_sk_hex"]),
        )
        entry["hash_hex"] = digest.hex()

    for entry in data.get("levels", []):
        nxt = next_level_secrets(
            bytes.fromhex(entry["vis_sk_hex"]),
            bytes.fromhex(entry["hid_sk_hex"]),
            bytes.fromhex(entry["next_hid_sk_hex"]),
        )
        if nxt["hid_sk"].hex() != entry["next_hid_sk_hex"]:
            raise ValueError(f"hidden secret changed for level '{entry['id']}'")
        entry["next_vis_sk_hex"] = nxt["vis_sk"].hex()


def main() -> None:
    if not VECTORS_PATH.exists():
        raise SystemExit(f"Vector file not found: {VECTORS_PATH}")

    data = load_vectors()

    populate_states(data)
    populate_keys(data)

    save_vectors(data)
    print(f"Updated vectors written to {VECTORS_PATH}")


if __name__ == "__main__":
    main()
