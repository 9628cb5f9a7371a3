#!/usr/bin/env python3
import argparse
import binascii
import json
import logging
import sys
from pathlib import Path

from .config import N_DEFAULT
from .core import npub_from_pubkey, nsec_from_secret
from .derivation import new_mnemonic
from .errors import Nip41Error
from .lineage import invalidation_to_dict, verify, verify_invalidation
from .state import KeyState, generate_from_mnemonic, generate_from_seed


def fail(message):
    print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def load_state(args) -> KeyState:
    """
    Rebuild the key state from --mnemonic or --seed.
    """
    if args.mnemonic is not None:
        return generate_from_mnemonic(args.mnemonic, levels=args.levels)
    try:
        seed = binascii.unhexlify(args.seed)
    except (binascii.Error, ValueError):
        fail("seed must be hex")
    return generate_from_seed(seed, levels=args.levels)


def cmd_generate(args):
    """
    nip41 generate [--levels N]
    """
    mnemonic = new_mnemonic()
    with generate_from_mnemonic(mnemonic, levels=args.levels) as state:
        pk = state.current_visible_pubkey()
        out = {
            "mnemonic": mnemonic,
            "levels": state.levels(),
            "current_level": state.current_level,
            "pk_hex": pk.hex(),
            "npub": npub_from_pubkey(pk),
        }
    print(json.dumps(out, indent=2))


def cmd_current(args):
    """
    nip41 current (--mnemonic "<words>" | --seed <hex>) [--levels N] [--show-secret]
    """
    with load_state(args) as state:
        pk = state.current_visible_pubkey()
        out = {
            "levels": state.levels(),
            "current_level": state.current_level,
            "pk_hex": pk.hex(),
            "npub": npub_from_pubkey(pk),
        }
        if args.show_secret:
            sk = state.current_visible_secret_key()
            out["sk_hex"] = sk.hex()
            out["nsec"] = nsec_from_secret(sk)
    print(json.dumps(out, indent=2))


def cmd_invalidate(args):
    """
    nip41 invalidate (--mnemonic "<words>" | --seed <hex>) [--levels N] [--count K]
    """
    if args.count < 1:
        fail("--count must be at least 1")
    with load_state(args) as state:
        for _ in range(args.count):
            invalidation = state.invalidate()
    print(json.dumps(invalidation_to_dict(invalidation), indent=2))


def cmd_verify(args):
    """
    nip41 verify invalidation.json
    """
    path = Path(args.file)
    if not path.exists():
        fail(f"file not found: {path}")

    with path.open() as f:
        try:
            record = json.load(f)
        except json.JSONDecodeError as exc:
            fail(f"not a JSON file: {exc}")

    if verify_invalidation(record):
        print("valid")
    else:
        print("invalid")
        sys.exit(1)


def cmd_verify_keys(args):
    """
    nip41 verify-keys --next-visible <hex> --next-hidden <hex> --prev-visible <hex>
    """
    try:
        keys = [
            binascii.unhexlify(h)
            for h in (args.next_visible, args.next_hidden, args.prev_visible)
        ]
    except (binascii.Error, ValueError):
        fail("keys must be hex")

    if verify(*keys):
        print("valid")
    else:
        print("invalid")
        sys.exit(1)


def add_levels_arg(p):
    p.add_argument(
        "--levels",
        type=int,
        default=N_DEFAULT,
        help=f"number of pre-generated levels (default: {N_DEFAULT})",
    )


def add_source_args(p):
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--mnemonic", help="BIP-39 mnemonic, space separated words")
    src.add_argument("--seed", help="64-byte master seed in hex")


def build_parser():
    p = argparse.ArgumentParser(prog="nip41", description="NIP-41 rotating keys CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    # generate
    g = sub.add_parser("generate", help="generate a new mnemonic and key state")
    add_levels_arg(g)
    g.set_defaults(func=cmd_generate)

    # current
    c = sub.add_parser("current", help="show the current visible key")
    add_source_args(c)
    add_levels_arg(c)
    c.add_argument("--show-secret", action="store_true", help="also print the secret key")
    c.set_defaults(func=cmd_current)

    # invalidate
    i = sub.add_parser("invalidate", help="invalidate the current key")
    add_source_args(i)
    add_levels_arg(i)
    i.add_argument("--count", type=int, default=1, help="number of invalidations (default: 1)")
    i.set_defaults(func=cmd_invalidate)

    # verify
    v = sub.add_parser("verify", help="verify an invalidation JSON file")
    v.add_argument("file", help="path to invalidation.json")
    v.set_defaults(func=cmd_verify)

    # verify-keys
    k = sub.add_parser("verify-keys", help="verify a rotation from three public keys")
    k.add_argument("--next-visible", required=True, help="invalidated visible key (hex)")
    k.add_argument("--next-hidden", required=True, help="revealed hidden key (hex)")
    k.add_argument("--prev-visible", required=True, help="new current visible key (hex)")
    k.set_defaults(func=cmd_verify_keys)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        args.func(args)
    except Nip41Error as exc:
        fail(str(exc))


if __name__ == "__main__":
    main()
