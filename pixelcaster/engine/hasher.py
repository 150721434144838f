"""
Identifier hashing.

Turns a Farcaster ID or a wallet address into a stable non-negative seed.

Two modes:
- Numeric (FID): the decimal value itself. "" is defined as 0.
- Address: a polynomial rolling hash over the lower-cased hex digits,
  reduced modulo a prime at every step.

INVARIANT: Same string in, same integer out, forever. Minted metadata is
regenerated from these values on demand.
"""

import string

from pixelcaster.models.failure import InvalidIdentifierError

HASH_MULTIPLIER = 31
HASH_MODULUS = 2_147_483_647  # 2**31 - 1

# Longest accepted decimal ID; a uint256 has 78 digits
MAX_ID_DIGITS = 78

_HEX_DIGITS = frozenset(string.hexdigits.lower())


def _strip_hex_prefix(raw: str) -> str:
    if raw[:2] in ("0x", "0X"):
        return raw[2:]
    return raw


def hash_fid(raw: str) -> int:
    """
    Hash a numeric Farcaster ID.

    Args:
        raw: Decimal digits, or the empty string

    Returns:
        The integer value of the digits (0 for the empty string)

    Raises:
        InvalidIdentifierError: If the string contains anything but ASCII digits,
            or more than MAX_ID_DIGITS of them
    """
    if raw == "":
        return 0
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidIdentifierError(raw, "FID must be a non-negative integer")
    if len(raw) > MAX_ID_DIGITS:
        raise InvalidIdentifierError(raw, "FID is too long")
    return int(raw)


def hash_address(raw: str) -> int:
    """
    Hash a wallet address.

    The optional 0x prefix is removed and the remainder lower-cased, so a
    checksummed address hashes the same as its lower-case form.

    Args:
        raw: Hex address, with or without the 0x prefix

    Returns:
        Integer in [0, HASH_MODULUS)

    Raises:
        InvalidIdentifierError: If nothing is left after the prefix, or a
            non-hex character is present
    """
    digits = _strip_hex_prefix(raw).lower()
    if not digits:
        raise InvalidIdentifierError(raw, "address is empty")
    if not _HEX_DIGITS.issuperset(digits):
        raise InvalidIdentifierError(raw, "address must contain only hex digits")

    h = 0
    for ch in digits:
        h = (h * HASH_MULTIPLIER + ord(ch)) % HASH_MODULUS
    return h


def hash_identifier(raw: str) -> int:
    """
    Hash either kind of identifier.

    Strings starting with 0x/0X are treated as addresses; everything else
    as a numeric FID.
    """
    if raw[:2] in ("0x", "0X"):
        return hash_address(raw)
    return hash_fid(raw)
