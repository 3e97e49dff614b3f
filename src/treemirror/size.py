"""Human-readable byte counts in IEC units (kiB = 2**10 B, MiB = 2**20 B, ...)."""

from __future__ import annotations

PREFIXES = "kMGTPE"
SIGNIFICANT_DIGITS = 5
FIELD_WIDTH = SIGNIFICANT_DIGITS + 4


def format_size(nbytes: int) -> str:
    """Format *nbytes* with five significant digits and an IEC unit.

    The unit is the largest one for which the scaled value is at least 1,
    so at most four digits precede the decimal point.  Digits past the
    fifth are truncated, not rounded.  Counts below 1024 print as a plain
    integer: ``"512  B"`` (padded so the unit always takes three chars).

    >>> format_size(2048)
    '2.0000kiB'
    >>> format_size(1023 * 1024)
    '1023.0kiB'
    """
    if nbytes < 0:
        raise ValueError("size must not be negative")
    if nbytes < 1024:
        return f"{nbytes}  B"

    unit = 0
    while unit + 1 < len(PREFIXES) and nbytes >> (10 * (unit + 2)):
        unit += 1
    shift = 10 * (unit + 1)

    int_digits = len(str(nbytes >> shift))
    decimals = max(SIGNIFICANT_DIGITS - int_digits, 0)
    scaled = str((nbytes * 10 ** decimals) >> shift)
    if decimals:
        scaled = f"{scaled[:-decimals]}.{scaled[-decimals:]}"
    return f"{scaled}{PREFIXES[unit]}iB"
