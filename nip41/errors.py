# nip41/errors.py


class Nip41Error(Exception):
    """Base exception for all key-level errors."""


class InvalidSeedMaterial(Nip41Error, ValueError):
    """Mnemonic failed wordlist/checksum validation, or the seed has the wrong length."""


class CurveArithmeticOverflow(Nip41Error, ArithmeticError):
    """A derived tweak is zero or not below the curve order.

    Re-deriving from different entropy is the only remedy.
    """


class ExhaustedLevels(Nip41Error):
    """No more levels left, ran out of pre-generated keys."""


class KeyStateClosed(Nip41Error):
    """The key state was closed and its secrets wiped."""
