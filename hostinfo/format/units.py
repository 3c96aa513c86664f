"""
Human-readable formatting of durations and byte counts.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

# ---------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------

S_DIVIDER = 1000
MN_DIVIDER = 60_000
HR_DIVIDER = 3_600_000


def _number(value) -> str:
    """
    Render a number without a trailing `.0` when it is integral.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_duration(milliseconds) -> str:
    """
    Format a millisecond count using the coarsest applicable breakdown.

    >>> format_duration(500)
    '500ms'
    >>> format_duration(1500)
    '1.5s'
    >>> format_duration(65000)
    '1mn 5s'
    >>> format_duration(3725000)
    '1hr 2mn 5s'

    Seconds are never rounded: 61234 gives '1mn 1.234s'.
    """
    if milliseconds < S_DIVIDER:
        return f"{_number(milliseconds)}ms"
    if milliseconds < MN_DIVIDER:
        return f"{_number(milliseconds / S_DIVIDER)}s"
    if milliseconds < HR_DIVIDER:
        minutes = int(milliseconds // MN_DIVIDER)
        seconds = (milliseconds % MN_DIVIDER) / S_DIVIDER
        return f"{minutes}mn {_number(seconds)}s"

    hours = int(milliseconds // HR_DIVIDER)
    remaining = milliseconds % HR_DIVIDER
    minutes = int(remaining // MN_DIVIDER)
    seconds = (remaining % MN_DIVIDER) / S_DIVIDER
    return f"{hours}hr {minutes}mn {_number(seconds)}s"


# ---------------------------------------------------------------------
# Sizes
# ---------------------------------------------------------------------

SIZE_UNITS = ("kB", "MB", "GB")


class ScaledSize(NamedTuple):
    value: float
    unit: str


def scale_size(num_bytes) -> ScaledSize:
    """
    Scale a byte count to the largest unit up to GB.

    Each promotion is decided on the value already scaled by the previous
    step, so exactly 1024 bytes is (1.0, "kB") and 1024**4 stays at
    (1024.0, "GB").
    """
    value, unit = float(num_bytes), "B"
    for candidate in SIZE_UNITS:
        if value / 1024 < 1:
            break
        value, unit = value / 1024, candidate
    return ScaledSize(value, unit)


def format_memory(num_bytes, qualifier: str) -> str:
    """
    e.g. format_memory(17179869184, "total") -> '16.00 GB (total)'

    Two decimals, ties rounded up: 1.125 GB renders as 1.13 GB.
    """
    size = scale_size(num_bytes)
    value = Decimal(size.value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value} {size.unit} ({qualifier})"
