"""Serial numbers of the form #NNNNN/20000."""

MAX_SUPPLY = 20_000


def serial_number(seed: int) -> int:
    """Numeric serial in [1, MAX_SUPPLY]."""
    return seed % MAX_SUPPLY + 1


def allocate_serial(seed: int) -> str:
    """Formatted serial, zero-padded to five digits."""
    return f"#{serial_number(seed):05d}/{MAX_SUPPLY}"
